"""
HTML rendering for the preference form and the timeline.

The page is plain server-rendered HTML. The form posts back to "/", and a
small script keeps the timeline list in sync with /ws/timeline, which
pushes the re-rendered list items on every store change.
"""

import html
import json
from typing import Dict, List, Optional

from travel_recommender.views.form import FORM_FIELDS
from travel_recommender.views.timeline import EMPTY_TIMELINE_MESSAGE, TimelineEntry

FIELD_LABELS = {
    "username": ("Username", "Enter your username"),
    "age": ("Age", "Enter your age"),
    "style": ("Travel style", "Enter your travel style e.g. 'Relaxed'"),
    "activity": ("Favourite Activity", "Enter your favourite activity"),
}


def render_timeline_items(entries: List[TimelineEntry]) -> str:
    """Render the <li> items of the timeline list."""
    if not entries:
        return f'<li class="muted">{EMPTY_TIMELINE_MESSAGE}</li>'

    items: List[str] = []
    for entry in entries:
        items.append(
            "\n".join(
                [
                    f'<li class="card" data-key="{html.escape(entry.key)}">',
                    f'  <div class="muted small">{html.escape(entry.timestamp)}</div>',
                    f'  <div class="strong">{html.escape(entry.username)} &rarr; '
                    f'<span class="accent">{html.escape(entry.city)}, {html.escape(entry.country)}</span></div>',
                    f'  <div class="small">Age: {html.escape(entry.age)} &bull; '
                    f'Travel style: {html.escape(entry.style)} &bull; '
                    f'Activity: {html.escape(entry.activity)}</div>',
                    f'  <div class="small">{html.escape(entry.recommendation)}</div>',
                    "</li>",
                ]
            )
        )
    return "\n".join(items)


def _render_field(name: str, value: str, error: Optional[str]) -> str:
    label, placeholder = FIELD_LABELS[name]
    error_html = f'<p class="error">{html.escape(error)}</p>' if error else ""
    return f"""
      <div class="field">
        <label for="{name}">{label}</label>
        <input id="{name}" name="{name}" value="{html.escape(value)}" placeholder="{html.escape(placeholder)}" />
        {error_html}
      </div>"""


def render_page(
    entries: List[TimelineEntry],
    values: Optional[Dict[str, str]] = None,
    errors: Optional[Dict[str, str]] = None,
    alert: Optional[str] = None,
) -> str:
    """
    Render the full page.

    Args:
        entries: Timeline entries, already ordered newest first
        values: Current form values (empty after a successful submit)
        errors: Per-field validation messages
        alert: Message shown with a blocking browser alert
    """
    values = values or {}
    errors = errors or {}

    fields_html = "".join(
        _render_field(name, values.get(name, ""), errors.get(name)) for name in FORM_FIELDS
    )
    # json.dumps gives a JS string literal; "</" is escaped so the message
    # cannot close the script tag.
    alert_script = ""
    if alert:
        alert_literal = json.dumps(alert).replace("</", "<\\/")
        alert_script = f"<script>alert({alert_literal});</script>"

    return f"""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Travel Recommender</title>
  <style>
    body {{ font-family: system-ui, sans-serif; margin: 0; color: #1f2937; }}
    main {{ max-width: 42rem; margin: 0 auto; padding: 1.5rem; }}
    form {{ display: flex; flex-direction: column; gap: 1rem; margin-bottom: 1.5rem; }}
    .field {{ display: flex; flex-direction: column; }}
    label {{ margin-bottom: .25rem; font-weight: 500; color: #374151; }}
    input {{ border: 1px solid #d1d5db; padding: .5rem; border-radius: .25rem; }}
    button {{ background: #2563eb; color: #fff; padding: .5rem; border: 0; border-radius: .25rem; }}
    button:disabled {{ opacity: .6; }}
    ul {{ list-style: none; padding: 0; display: flex; flex-direction: column; gap: .75rem; }}
    .card {{ border: 1px solid #e5e7eb; padding: .75rem; border-radius: .25rem; }}
    .error {{ color: #ef4444; margin: .25rem 0 0; font-size: .875rem; }}
    .muted {{ color: #6b7280; }}
    .small {{ font-size: .875rem; }}
    .strong {{ font-weight: 500; }}
    .accent {{ color: #4f46e5; }}
  </style>
</head>
<body>
  <main>
    <h1>Travel Recommender</h1>

    <form id="preferences" method="post" action="/">{fields_html}
      <button id="submit" type="submit">Submit</button>
    </form>

    <section>
      <h2>Timeline</h2>
      <ul id="timeline">
{render_timeline_items(entries)}
      </ul>
    </section>
  </main>
  {alert_script}
  <script>
    document.getElementById('preferences').addEventListener('submit', () => {{
      const button = document.getElementById('submit');
      button.disabled = true;
      button.textContent = 'Thinking...';
    }});

    (function connect() {{
      const scheme = location.protocol === 'https:' ? 'wss' : 'ws';
      const socket = new WebSocket(`${{scheme}}://${{location.host}}/ws/timeline`);
      socket.onmessage = (event) => {{
        document.getElementById('timeline').innerHTML = event.data;
      }};
      socket.onclose = () => setTimeout(connect, 3000);
    }})();
  </script>
</body>
</html>"""
