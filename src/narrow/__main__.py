from narrow.main import run

run()
