def print_standing_text(txt, width=100):
	print("\r" + " " * width + "\r" + txt, end="", flush=True)
