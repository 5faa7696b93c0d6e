from powersplit.config import config
from powersplit.errors import ValidationError

usage = """Usage: -energy <W> -time <s> -target <W> [-max <gates>] [-t <rate>] [-order 32|23] [-save <path>] [-preset <name>]
  -energy  battery output power (W)
  -time    battery duration (s)
  -target  target power (W)
  -max     max gates per splitter kind
  -t       battery generation rate (batteries/s), rational like 0.5 or 1/2 (default {default_rate})
  -order   3-way gates first (32) or 2-way gates first (23)
  -save    render the network to <path>.{extension}
  -preset  fill in -energy and -time from a battery preset: {presets}"""

def get_usage():
	return usage.format(default_rate=config.default_rate, extension=config.solutions_filename_extension, presets=", ".join(config.presets))

def parse_uint(name, value):
	if not value.isascii() or not value.isdigit():
		raise ValidationError(f"invalid value {value!r} for flag -{name}: must be a non-negative integer")
	return int(value)

def parse_order(name, value):
	digits = value.replace(',', '')
	if digits not in ('32', '23'):
		raise ValidationError(f"invalid value {value!r} for flag -{name}: use 32 or 23")
	return tuple(int(d) for d in digits)

def parse_str(name, value):
	return value

def parse_preset(name, value):
	if value not in config.presets:
		raise ValidationError(f"unknown preset {value!r}, use one of: {', '.join(config.presets)}")
	return value

flag_parsers = {
	'energy': parse_uint,
	'time': parse_uint,
	'target': parse_uint,
	'max': parse_uint,
	't': parse_str,
	'order': parse_order,
	'save': parse_str,
	'preset': parse_preset,
}

help_flags = ('h', 'help')

def get_default_options():
	return {
		'energy': 0,
		'time': 0,
		'target': 0,
		'max': 0,
		't': config.default_rate,
		'order': config.arity_order,
		'save': None,
		'preset': None,
		'help': False,
	}

def parse_user_input(user_input):
	# accepts -flag value, -flag=value, --flag value and --flag=value
	args = user_input.split() if isinstance(user_input, str) else list(user_input)
	options = get_default_options()
	given = set()
	i = 0
	while i < len(args):
		arg = args[i]
		if not arg.startswith('-') or arg in ('-', '--'):
			raise ValidationError(f"unexpected argument {arg!r}")
		name = arg[2:] if arg.startswith('--') else arg[1:]
		value = None
		if '=' in name: name, value = name.split('=', 1)
		if name in help_flags:
			options['help'] = True
			i += 1
			continue
		if name not in flag_parsers:
			raise ValidationError(f"flag provided but not defined: -{name}")
		if value is None:
			if i + 1 == len(args):
				raise ValidationError(f"flag needs an argument: -{name}")
			value = args[i + 1]
			i += 2
		else:
			i += 1
		options[name] = flag_parsers[name](name, value)
		given.add(name)
	if options['preset']:
		# explicit -energy and -time win over the preset
		energy, duration = config.presets[options['preset']]
		if 'energy' not in given: options['energy'] = energy
		if 'time' not in given: options['time'] = duration
	return options
