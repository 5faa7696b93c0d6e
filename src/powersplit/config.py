class PowerSplitConfig:
	def __init__(self,
			default_rate: str,
			arity_order: tuple[int, ...],
			float_digits: int,
			logging: bool,
			log_filepath: str,
			prompt_name: str,
			solutions_filename_extension: str,
			history_filepath: str | None,
			presets: dict[str, tuple[int, int]],
			max_gates_warning: int
		):
		self.default_rate = default_rate
		self.arity_order = tuple(arity_order)
		self.float_digits = float_digits
		self.logging = logging
		self.log_filepath = log_filepath
		self.prompt_name = prompt_name
		self.solutions_filename_extension = solutions_filename_extension
		self.history_filepath = history_filepath
		self.presets = dict(presets)
		self.max_gates_warning = max_gates_warning

		self.allowed_arities = [2, 3]

config = PowerSplitConfig(
	default_rate = "0.5",
	# all 3-way gates first, then all 2-way gates
	arity_order = (3, 2),
	float_digits = 6,
	logging = False,
	log_filepath = "logs.txt",
	prompt_name = "Power Splitter",
	solutions_filename_extension = "png",
	history_filepath = None,
	# name -> (energy W, time s)
	presets = {
		"source-ore": (50, 8),
		"valley-low": (220, 40),
		"valley-mid": (420, 40),
		"valley-high": (1100, 40),
		"wuling-low": (1600, 40),
	},
	# the search grid grows with max^2
	max_gates_warning = 100
)
