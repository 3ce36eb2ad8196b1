"""Dev entry point: `python app.py` (or `flask --app app run`)."""

import os

from src.recepcion_system.recepcion_system.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=app.config["DEBUG"])
