from wp_frontend.main import run

run()
