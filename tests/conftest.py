import os
import tempfile

# src.config reads LOG_FILE at import time; keep test runs out of the repo's bot.log
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "deribit-client-tests.log"))
