from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Basic auth settings
    auth_username: str
    auth_password: str

    # Notes settings
    notes_dir: Path = Path("data/notes")
    id_pattern: str = r"(\d{14})"  # Zettelkasten-style timestamp IDs

    # Output settings
    graph_output_path: str = "data/graph.json"

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()  # type: ignore
