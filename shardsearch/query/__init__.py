"""Query layer — one module per catalog site, composing fetch → parse."""
