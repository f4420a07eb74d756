from __future__ import annotations

from landing.app import LandingAppConfig, run_landing_app


def main() -> None:
    """Chaingex entry point."""
    cfg = LandingAppConfig(
        brand_name='Chaingex',
        page_title='Chaingex',
    )
    run_landing_app(cfg=cfg)


if __name__ == '__main__':
    main()
