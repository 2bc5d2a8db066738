import os

from dotenv import load_dotenv

from foodlens import create_app
from foodlens.config.settings import config

load_dotenv()

# Create the Flask application
app = create_app(config[os.getenv("FOODLENS_ENV", "default")])

if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=app.config.get("DEBUG", False), use_reloader=False)
