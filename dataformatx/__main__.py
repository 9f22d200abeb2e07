from dataformatx.cli import app

app()
