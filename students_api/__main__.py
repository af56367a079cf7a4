from students_api.main import run

run()
