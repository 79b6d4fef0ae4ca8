import yaml

from defaults import DEFAULT_PARAMS


"""
Expected type of every parameter; None is allowed only for `seed`
"""
PARAM_TYPES = {
    'num_cubes'        : int,
    'scramble_turns'   : int,
    'seed'             : int,
    'retry_cap'        : int,
    'loop_ceiling'     : int,
    'log_path'         : str,
    'log_filename'     : str,
    'verbose'          : bool,
    'show_cubes'       : bool,
    'compare_baseline' : bool,
}

POSITIVE_PARAMS = ('num_cubes', 'retry_cap', 'loop_ceiling')


class YParams:
    """
    Class to save parameters from yaml config file
    Parameters of the config file will be saved as object attributes,
    missing ones are taken from `defaults.DEFAULT_PARAMS`

    Parameters
    ----------
    `filepath` : str, optional
        Path to config file with parameters. Only defaults are used if None.
    `overrides` : dict, optional
        Values which replace the ones of the config file, None values are ignored
    """
    def __init__(self, filepath : str = None, overrides : dict = None):
        self.filepath = filepath
        self._load_params(overrides or {})

    def _load_params(self, overrides : dict):
        """
        Load parameters from config file, apply overrides and validate them
        """
        params = {}
        if self.filepath:
            with open(self.filepath) as f:
                params = yaml.load(f, Loader=yaml.FullLoader) or {}
            if not isinstance(params, dict):
                raise ValueError(f'Config file {self.filepath} must hold a mapping of parameters')

        self.kw = dict(DEFAULT_PARAMS)
        self.kw.update(params)
        self.kw.update({name: value for name, value in overrides.items() if value is not None})
        self._validate()
        for param_name, param_value in self.kw.items():
            setattr(self, param_name, param_value)

    def _validate(self):
        unknown = set(self.kw) - set(PARAM_TYPES)
        if unknown:
            raise ValueError(f'Unknown parameters: {", ".join(sorted(unknown))}')
        for name, expected in PARAM_TYPES.items():
            value = self.kw[name]
            if name == 'seed' and value is None:
                continue
            # bool is an int, but not the other way round
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ValueError(f'Parameter {name} must be {expected.__name__}, got {value!r}')
        if self.kw['scramble_turns'] < 0:
            raise ValueError(f'Parameter scramble_turns must not be negative, got {self.kw["scramble_turns"]}')
        if self.kw['seed'] is not None and self.kw['seed'] < 0:
            raise ValueError(f'Parameter seed must not be negative, got {self.kw["seed"]}')
        for name in POSITIVE_PARAMS:
            if self.kw[name] < 1:
                raise ValueError(f'Parameter {name} must be positive, got {self.kw[name]}')

    def display(self, log_function=print):
        for param_name, param_value in self.kw.items():
            log_function(f'{param_name}: {param_value}')
