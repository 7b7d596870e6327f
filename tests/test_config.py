from app.core.config import Settings


def test_cors_origins_accept_a_comma_separated_list() -> None:
    settings = Settings(CORS_ORIGINS="http://localhost:5173, https://panel.campus.edu,")
    assert settings.allowed_origins == ["http://localhost:5173", "https://panel.campus.edu"]


def test_cors_origins_default_to_any() -> None:
    assert Settings(CORS_ORIGINS="*").allowed_origins == ["*"]
