# app.py
import logging
import os
import dash

from config import APP_TITLE, LOG_LEVEL
from layout import serve_layout

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Create the Dash app first so dash.callback can register callbacks
app = dash.Dash(__name__, suppress_callback_exceptions=True)
app.title = APP_TITLE
server = app.server  # <- Render/Gunicorn entry point

app.layout = serve_layout

# IMPORTANT: import after app is created so @callback uses this app
import callbacks  # noqa: F401,E402

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8050))
    app.run(host="0.0.0.0", port=port, debug=False, use_reloader=False)
