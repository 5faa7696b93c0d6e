import sys
from prompt_toolkit import prompt
from prompt_toolkit.history import InMemoryHistory, FileHistory

from powersplit.config import config
from powersplit.planner import PowerSplitPlanner

class UniqueInMemoryHistory(InMemoryHistory):
	def append_string(self, string: str) -> None:
		string = string.replace('⧸', '/')
		if string in self._storage: self._storage.remove(string)
		if string in self._loaded_strings: self._loaded_strings.remove(string)
		self.store_string(string)
		self._loaded_strings.insert(0, string)

exit_commands = ["exit", "quit", "q"]

class CLI:
	def __init__(self, name, backend_class):
		self.name = name
		self.backend = backend_class(interactive=True)
		self.user_input = None
		self.running = False
		if config.history_filepath:
			self.input_history = FileHistory(config.history_filepath)
		else:
			self.input_history = UniqueInMemoryHistory()

	def main(self):
		if self.backend.load(self.user_input):
			self.backend.run()

	def run(self):
		self.running = True
		while self.running:
			try:
				self.user_input = prompt(f"\n{self.name}> ", history=self.input_history)
			except (KeyboardInterrupt, EOFError):
				break
			if self.user_input.strip() in exit_commands:
				break
			if self.user_input.strip():
				self.main()
			self.user_input = None

		self.backend.close()
		self.running = False

def main(argv=None):
	if argv is None: argv = sys.argv[1:]
	if not argv:
		CLI(config.prompt_name, PowerSplitPlanner).run()
		return 0
	planner = PowerSplitPlanner()
	try:
		if planner.load(argv): planner.run()
	finally:
		planner.close()
	return planner.exit_code
