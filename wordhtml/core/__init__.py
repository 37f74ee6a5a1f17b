"""GUI-agnostic core: models, DOCX reader, HTML converter and services."""
