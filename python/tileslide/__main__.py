from tileslide.main import app

app(prog_name="tileslide")
