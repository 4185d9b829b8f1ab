from roomvideo.main import run

run()
