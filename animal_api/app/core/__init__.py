"""Cross‑cutting infrastructure: settings, logging, database and errors."""
