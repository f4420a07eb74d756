"""
Class name lookup for language specific styling.

A style module maps class keys (e.g. 'button__small' or
'button__small__i18n_ukr') to the class names used in the stylesheet.
Variant keys are the base key plus a language's style_variant suffix.
"""

from collections.abc import Mapping

from ui.errors import StyleLookupError

HOME_STYLES: dict[str, str] = {
    'header': 'home-header',
    'header__left': 'home-header-left',
    'logo': 'home-logo',
    'navigation': 'home-navigation',
    'navigation__item': 'home-navigation-item',
    'navigation__item__i18n_ukr': 'home-navigation-item-ukr',
    'navigation__item__i18n_pl': 'home-navigation-item-pl',
    'navigation__link': 'home-navigation-link',
    'button': 'home-button',
    'button__small': 'home-button-small',
    'button__small__i18n_ukr': 'home-button-small-ukr',
    'button__large': 'home-button-large',
    'button__large__i18n_ukr': 'home-button-large-ukr',
    'button__large__i18n_pl': 'home-button-large-pl',
    'headline': 'home-headline',
    'headline__container': 'home-headline-container',
    'headline__title': 'home-headline-title',
    'headline__title__i18n_ukr': 'home-headline-title-ukr',
    'headline__title__i18n_pl': 'home-headline-title-pl',
    'headline__subtitle': 'home-headline-subtitle',
    'headline__subtitle__i18n_ukr': 'home-headline-subtitle-ukr',
}

SELECT_STYLES: dict[str, str] = {
    'label': 'select-label',
    'label__i18n_ukr': 'select-label-ukr',
    'label__i18n_pl': 'select-label-pl',
}


def lookup_styled_class_name(
    base_name: str,
    style_variant: str,
    style_module: Mapping[str, str],
) -> str:
    """
    Look up the class name for a base key and a style variant.

    Args:
        base_name: Base class key, e.g. 'label'.
        style_variant: Variant suffix, e.g. '__i18n_ukr', or ''.
        style_module: Class key to class name mapping.

    Returns:
        The variant class name if present, else the base class name.

    Raises:
        StyleLookupError: If the base key is missing from the style module.
    """
    if base_name not in style_module:
        raise StyleLookupError(f'No .{base_name} class in style module.')

    if style_variant:
        variant_key = base_name + style_variant
        if variant_key in style_module:
            return style_module[variant_key]

    return style_module[base_name]


def class_names(base_name: str, style_variant: str, style_module: Mapping[str, str]) -> str:
    """Return the base class name, followed by the variant class name when one exists."""
    base = lookup_styled_class_name(base_name, '', style_module)
    styled = lookup_styled_class_name(base_name, style_variant, style_module)
    if styled == base:
        return base
    return f'{base} {styled}'


STYLESHEET: str = """
.home-header {
    display: flex;
    align-items: center;
    justify-content: space-between;
    padding: 1rem 0;
}
.home-header-left {
    display: flex;
    align-items: center;
    gap: 3rem;
}
.home-logo {
    font-size: 1.5rem;
    font-weight: 700;
    letter-spacing: 0.02em;
}
.home-navigation {
    display: flex;
    gap: 2rem;
    list-style: none;
    margin: 0;
    padding: 0;
}
.home-navigation-item {
    font-size: 1rem;
    margin: 0;
}
.home-navigation-item-ukr,
.home-navigation-item-pl {
    font-size: 0.9rem;
}
.home-navigation-link {
    color: inherit;
    text-decoration: none;
}
.home-button {
    border: none;
    border-radius: 0.5rem;
    background: #3d5afe;
    color: #ffffff;
    cursor: pointer;
}
.home-button-small {
    padding: 0.5rem 1.25rem;
    font-size: 0.9rem;
}
.home-button-small-ukr {
    font-size: 0.8rem;
}
.home-button-large {
    padding: 1rem 2.5rem;
    font-size: 1.1rem;
}
.home-button-large-ukr,
.home-button-large-pl {
    font-size: 1rem;
}
.home-headline {
    display: flex;
    flex-direction: column;
    gap: 2rem;
    padding: 4rem 0;
}
.home-headline-container {
    max-width: 48rem;
}
.home-headline-title {
    font-size: 3rem;
    font-weight: 700;
    line-height: 1.15;
    margin: 0;
}
.home-headline-title-ukr,
.home-headline-title-pl {
    font-size: 2.6rem;
}
.home-headline-subtitle {
    font-size: 1.25rem;
    margin: 1rem 0 0 0;
}
.home-headline-subtitle-ukr {
    font-size: 1.1rem;
}
div[class*="st-key-select-label"] button {
    border: none;
    background: transparent;
    width: 100%;
}
div[class*="st-key-select-label-ukr"] button p,
div[class*="st-key-select-label-pl"] button p {
    font-size: 0.9rem;
}
"""
