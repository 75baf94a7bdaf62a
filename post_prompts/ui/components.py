"""
HTML snippets rendered through streamlit.components.v1.html.

Clipboard writes and window.open must run in the browser, so both actions
are plain buttons inside a small iframe.
"""

import json
import uuid

_BUTTON_CSS = """
  body { margin:0; padding:0; background:transparent; }
  .btn {
    width:100%;
    padding:8px 12px;
    border-radius:8px;
    border:none;
    background:BG_COLOR;
    color:white;
    cursor:pointer;
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial;
    font-size:14px;
  }
"""


def _js_literal(value) -> str:
    """JSON literal that cannot close the surrounding <script> tag."""
    return json.dumps(value).replace("</", "<\\/")


def _page(uid: str, label: str, bg: str, script: str) -> str:
    css = _BUTTON_CSS.replace("BG_COLOR", bg)
    return f"""
    <!doctype html>
    <html>
      <head>
        <meta charset="utf-8"/>
        <style>{css}</style>
      </head>
      <body>
        <button id="{uid}" class="btn">{label}</button>
        <script>
          const btn = document.getElementById("{uid}");
          {script}
        </script>
      </body>
    </html>
    """


def copy_button_html(text: str, label: str = "Copy All", bg: str = "#03224C") -> str:
    """Button that writes `text` to the clipboard and flashes 'Copied'."""
    uid = "btn_" + uuid.uuid4().hex
    script = f"""
          const txt = {_js_literal(text)};
          btn.addEventListener('click', function() {{
            navigator.clipboard.writeText(txt).then(function() {{
              btn.innerText = 'Copied';
              setTimeout(() => {{ btn.innerText = {json.dumps(label)}; }}, 1500);
            }}).catch(function() {{
              alert('Copy failed - please select and copy manually.');
            }});
          }});
    """
    return _page(uid, label, bg, script)


def open_tabs_button_html(
    urls: list[str],
    stagger: float,
    label: str = "Open in Tabs",
    bg: str = "#FF8828",
) -> str:
    """Button that opens each URL in a new tab, `stagger` seconds apart."""
    uid = "btn_" + uuid.uuid4().hex
    stagger_ms = int(round(stagger * 1000))
    script = f"""
          const urls = {_js_literal(urls)};
          btn.addEventListener('click', function() {{
            urls.forEach(function(url, i) {{
              setTimeout(function() {{ window.open(url, '_blank'); }}, i * {stagger_ms});
            }});
          }});
    """
    return _page(uid, label, bg, script)
