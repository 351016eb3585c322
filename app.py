"""Entry point.

Run: flask --app app run   (APP_ENV selects the settings module)
"""

from src.neirocalendar.neirocalendar.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=bool(app.config.get("DEBUG")))
