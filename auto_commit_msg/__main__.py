from auto_commit_msg.cli.main import run

run()
