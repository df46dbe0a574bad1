from fintrack.display.main import create_display_app

__all__ = ["create_display_app"]
