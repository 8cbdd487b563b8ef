from ndline.cli import app

app(prog_name="ndline")
