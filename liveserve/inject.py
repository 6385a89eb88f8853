import re

RELOAD_ROUTE = "/__ws"

RELOAD_JS = """
<script>
(function(){
  try {
    const proto = location.protocol === "https:" ? "wss" : "ws";
    const ws = new WebSocket(proto + "://" + location.host + "%(route)s");
    ws.onmessage = (ev) => { if (ev.data === "reload") location.reload(); };
  } catch (_) {}
})();
</script>
"""

CLOSING_BODY = re.compile(r"</body>", re.IGNORECASE)


def reload_snippet(route=RELOAD_ROUTE):
    return RELOAD_JS % {"route": route}


def inject_live_reload(html, route=RELOAD_ROUTE):
    """Insert the reload client before the last ``</body>``, at most once.

    Documents that already mention the route token are returned untouched.
    """
    if route.strip("/") in html:
        return html

    snippet = reload_snippet(route)
    matches = list(CLOSING_BODY.finditer(html))
    if not matches:
        return html + snippet
    idx = matches[-1].start()
    return html[:idx] + snippet + html[idx:]
