"""
Test reload client injection
"""

from liveserve.inject import inject_live_reload, reload_snippet


PAGE = "<html><body><h1>hi</h1></body></html>"


class TestInject:
    """Test where and how often the snippet lands"""

    def test_before_closing_body(self):
        out = inject_live_reload(PAGE)
        assert out == "<html><body><h1>hi</h1>" + reload_snippet() + "</body></html>"

    def test_exactly_once(self):
        assert inject_live_reload(PAGE).count("<script>") == 1

    def test_last_closing_body(self):
        html = "<body><pre>&lt;/body&gt; </body></pre></body>"
        out = inject_live_reload(html)
        assert out.endswith(reload_snippet() + "</body>")
        assert out.count(reload_snippet()) == 1

    def test_upper_case_body(self):
        out = inject_live_reload("<HTML><BODY>x</BODY></HTML>")
        assert out.endswith(reload_snippet() + "</BODY></HTML>")

    def test_non_ascii_before_body(self):
        # "İ".lower() is two characters long
        out = inject_live_reload("<body>İİİİ</body>")
        assert out == "<body>İİİİ" + reload_snippet() + "</body>"

    def test_non_ascii_mixed_case_body(self):
        out = inject_live_reload("<body>Straße İstanbul ΣΑΣ</Body></html>")
        assert out == "<body>Straße İstanbul ΣΑΣ" + reload_snippet() + "</Body></html>"

    def test_no_body_appends(self):
        html = "<p>fragment</p>"
        assert inject_live_reload(html) == html + reload_snippet()

    def test_already_has_marker(self):
        html = '<body><script>new WebSocket("ws://" + location.host + "/__ws")</script></body>'
        assert inject_live_reload(html) == html

    def test_idempotent(self):
        for html in (PAGE, "<p>no body</p>", ""):
            once = inject_live_reload(html)
            assert inject_live_reload(once) == once

    def test_custom_route(self):
        out = inject_live_reload(PAGE, route="/_reload")
        assert '"/_reload"' in out
        assert inject_live_reload(out, route="/_reload") == out


class TestSnippet:
    """Test the client behaviour encoded in the snippet"""

    def test_uses_secure_socket_over_https(self):
        js = reload_snippet()
        assert '"https:"' in js
        assert '"wss"' in js

    def test_reloads_on_signal(self):
        js = reload_snippet()
        assert 'ev.data === "reload"' in js
        assert "location.reload()" in js

    def test_swallows_setup_errors(self):
        assert "catch (_) {}" in reload_snippet()
