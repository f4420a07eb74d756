"""Translation dictionaries for the landing page (strings may include Unicode)."""

DEFAULT_LANG: str = 'eng'

SUPPORTED_LANGS: dict[str, str] = {
    'eng': 'Eng',
    'ukr': 'Укр',
    'pl': 'Pl',
}

NAV_KEYS: tuple[str, ...] = (
    'nav_home',
    'nav_peculiarities',
    'nav_guarantees',
    'nav_who_will_suit',
    'nav_faq',
)

TRANSLATIONS: dict[str, dict[str, str]] = {
    'eng': {
        'cta': 'Change crypto',
        'headline_subtitle': 'Chaingex is simple and secure platform to build your crypto '
                             'portfolio.',
        'headline_title': 'Buy bitcoins and cryptocurrencies instantly and securely!',
        'language_label': 'Language',
        'nav_faq': 'FAQ',
        'nav_guarantees': 'Guarantees',
        'nav_home': 'Home',
        'nav_peculiarities': 'Peculiarities',
        'nav_who_will_suit': 'Who will suit?',
    },
    'ukr': {
        'cta': 'Почати торгівлю',
        'headline_subtitle': 'Chaingex – проста та надійна платформа для вашого портфоліо.',
        'headline_title': 'Купуйте біткоїни й криптовалюти швидко та надійно!',
        'language_label': 'Мова',
        'nav_faq': 'FAQ',
        'nav_guarantees': 'Гарантії',
        'nav_home': 'Головна сторінка',
        'nav_peculiarities': 'Особливості',
        'nav_who_will_suit': 'Кому підійде?',
    },
    'pl': {
        'cta': 'Rozpocznij handel',
        'headline_subtitle': 'Chaingex jest prostą i bezpieczną platformą dla Twojego '
                             'portfolio.',
        'headline_title': 'Kupuj bitcoiny oraz kryptowaluty szybko i bezpiecznie!',
        'language_label': 'Język',
        'nav_faq': 'FAQ',
        'nav_guarantees': 'Gwarancje',
        'nav_home': 'Strona główna',
        'nav_peculiarities': 'Osobliwości',
        'nav_who_will_suit': 'Komu się przyda?',
    },
}
