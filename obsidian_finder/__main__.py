from obsidian_finder import run_server

run_server()
