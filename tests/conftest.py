import os

# Keine Log-Datei während der Tests (muss vor dem Import der App gesetzt sein)
os.environ.setdefault("LOG_FILE", "")
