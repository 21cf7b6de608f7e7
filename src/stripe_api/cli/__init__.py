"""CLI (Typer + Rich) sobre el binding."""
