"""
promptgen - CLI entry point for `python -m promptgen`.
"""
from promptgen.main import app

if __name__ == "__main__":
    app()
