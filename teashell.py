# teashell.py
from pathlib import Path
from tea.cli import main

if __name__ == "__main__":
    main(env_path=Path(__file__).resolve().parent / ".env")
