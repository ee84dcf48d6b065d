"""
Resume Ready server entrypoint.

    FLASK_ENV=production python app.py
"""
import os

from dotenv import load_dotenv

load_dotenv()

from resume_ready import create_app  # noqa: E402

app = create_app()


if __name__ == "__main__":
    port = int(os.environ.get("PORT", "3000"))
    app.logger.info("Server is running on port %s", port)
    app.run(host="0.0.0.0", port=port)
