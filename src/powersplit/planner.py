import os, sys
from fractions import Fraction

from powersplit.config import config
from powersplit.errors import ValidationError, DegenerateBound, NoSolution
from powersplit.power import input_power
from powersplit.search import find_best
from powersplit.synthesizer import build_network

class Plan:
	def __init__(self, p, q, target, max_gates, result, network):
		self.p = p
		self.q = q
		self.target = target
		self.max_gates = max_gates
		self.result = result
		self.network = network

	@property
	def input_power(self):
		return Fraction(self.p, self.q)

	@property
	def output_power(self):
		return Fraction(self.p * self.result.m, self.q * self.result.D)

	def __repr__(self):
		return f"Plan(P_in={self.input_power}, target={self.target}, max={self.max_gates}, {self.result})"

def check_uint(name, value):
	if isinstance(value, bool) or not isinstance(value, int) or value < 0:
		raise ValidationError(f"{name} must be a non-negative integer")

def plan(energy, duration, target, max_gates, rate=None, arity_order=None, log=None, progress=None):
	if rate is None: rate = config.default_rate
	p, q = input_power(energy, duration, rate)
	check_uint("target", target)
	check_uint("max", max_gates)
	if log: log(f"energy={energy} time={duration} t={rate} target={target} max={max_gates}\nP_in = {p}/{q}\n")

	if Fraction(p, q) <= target:
		raise DegenerateBound("target >= P_in; output power cannot exceed target")

	if progress: progress("Searching...")
	result = find_best(p, q, target, max_gates)
	if log: log(f"best {result}\n")

	if progress: progress("Synthesizing...")
	network = build_network(result, arity_order, log=log)
	return Plan(p, q, target, max_gates, result, network)

class PowerSplitPlanner:
	def __init__(self, interactive=False):
		self.interactive = interactive
		self.running = False
		self.reset()
		if config.logging: self.log_file_handle = open(config.log_filepath, "a", encoding="utf-8")

	def log(self, txt):
		self.log_file_handle.write(txt)
		self.log_file_handle.flush()
		os.fsync(self.log_file_handle.fileno())

	def reset(self):
		self.options = None
		self.plan = None
		self.no_solution = None
		self.exit_code = 0

		if config.logging:
			open(config.log_filepath, "w").close()

	def error(self, msg):
		print(f"ERROR: {msg}", file=sys.stderr)
		self.exit_code = 1

	def warn(self, msg):
		print(f"WARNING: {msg}", file=sys.stderr)
		if config.logging: self.log(f"WARNING: {msg}\n")

	def load(self, user_input):
		from powersplit.utils.planner import parse_user_input, get_usage
		from powersplit.utils.text import print_standing_text

		self.reset()
		try:
			self.options = parse_user_input(user_input)
		except ValidationError as e:
			self.error(e)
			return False
		if self.options['help']:
			print(get_usage())
			return False

		options = self.options
		if options['max'] > config.max_gates_warning:
			self.warn(f"max > {config.max_gates_warning} may make the search slow")
		try:
			self.plan = plan(
				options['energy'], options['time'], options['target'], options['max'],
				rate=options['t'],
				arity_order=options['order'],
				log=self.log if config.logging else None,
				progress=print_standing_text if self.interactive else None
			)
		except ValidationError as e:
			self.error(e)
			return False
		except (DegenerateBound, NoSolution) as e:
			self.no_solution = str(e)
		finally:
			if self.interactive: print_standing_text("")
		return True

	def run(self):
		from powersplit.report import render_report, render_no_solution

		self.running = True
		if self.no_solution is not None:
			print(render_no_solution(self.no_solution), end="")
		else:
			print(render_report(self.plan), end="")
			if self.options['save']:
				try:
					filepath = self.plan.network.save(self.options['save'])
				except OSError as e:
					self.error(f"could not save {self.options['save']}: {e}")
				else:
					if self.interactive: print(f"\nSaved {filepath}")
		self.running = False

	def stop(self):
		# nothing to interrupt, a run is bounded by the gate budget
		self.running = False

	def close(self):
		if config.logging: self.log_file_handle.close()
