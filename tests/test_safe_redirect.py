from app.utils.safe_redirect import safe_redirect_url


class TestSafeRedirectUrl:

    def test_app_paths_allowed(self):
        assert safe_redirect_url("/dashboard") == "/dashboard"
        assert safe_redirect_url("/orders/abc") == "/orders/abc"
        assert safe_redirect_url("/dashboard?start_date=2024-03-01") == "/dashboard?start_date=2024-03-01"

    def test_external_urls_rejected(self):
        assert safe_redirect_url("https://evil.example/dashboard") == "/dashboard"
        assert safe_redirect_url("//evil.example") == "/dashboard"

    def test_unknown_paths_rejected(self):
        assert safe_redirect_url("/admin") == "/dashboard"
        assert safe_redirect_url("/ordersx") == "/dashboard"

    def test_empty_uses_fallback(self):
        assert safe_redirect_url("", "/orders") == "/orders"
        assert safe_redirect_url(None) == "/dashboard"
