import configparser
import math
import os
from loguru import logger

from genalg.exceptions    import InvalidConfigurationError
from genalg.random_source import RandomSource

class Config:

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding default values.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.population_size      = 20
            self.chromosome_length    = 10
            self.mutation_chance      = 0.01
            self.mutation_coefficient = 0.3
            self.seed                 = None
            self.num_jobs             = 1
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser(inline_comment_prefixes=(';', '#'))
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT, nullable=False):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    if nullable:
                        return None
                    raise ValueError(f"a value is required, got '{raw_value}'")
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise
            except ValueError as e:
                raise InvalidConfigurationError(f"[{section}] {key}: {e}") from e

        # [POPULATION]

        # The number of individuals in each generation.
        # The genetic algorithm preserves whatever size it is given;
        # this value is for the code creating the initial population.
        self.population_size = get_value('POPULATION', 'population_size', int)

        # The number of genes in each chromosome (e.g., the number
        # of weights and biases of the network it encodes).
        self.chromosome_length = get_value('POPULATION', 'chromosome_length', int)

        # [MUTATION]

        # The probability that any given gene is mutated.
        # Must lie in [0, 1].
        self.mutation_chance = get_value('MUTATION', 'mutation_chance', float)

        # The largest possible absolute change of a mutated gene.
        # Higher values make evolution more chaotic, which may help discover better
        # solutions but may also cause good enough solutions to be discarded.
        self.mutation_coefficient = get_value('MUTATION', 'mutation_coefficient', float)

        # [RANDOM]

        # The seed of the random source driving the whole run.
        # Use "None" to seed from OS entropy (non-reproducible runs).
        self.seed = get_value('RANDOM', 'seed', int, default=None, nullable=True)

        # [PARALLEL] (optional section)

        # Number of parallel workers used to create each new generation.
        #   1 - serial (default)
        #  -1 - use all available CPU cores
        #  >1 - use the specified number of workers
        self.num_jobs = get_value('PARALLEL', 'num_jobs', int, default=1)

        self._validate()
        logger.debug("[Config] Loaded configuration from '{}'", config_file)

    def _validate(self):
        if self.population_size < 1:
            raise InvalidConfigurationError(f"population_size must be >= 1, got {self.population_size}")
        if self.chromosome_length < 0:
            raise InvalidConfigurationError(f"chromosome_length must be >= 0, got {self.chromosome_length}")
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise InvalidConfigurationError(f"mutation_chance must be in [0, 1], got {self.mutation_chance}")
        if not (math.isfinite(self.mutation_coefficient) and self.mutation_coefficient >= 0.0):
            raise InvalidConfigurationError(f"mutation_coefficient must be finite and >= 0, got {self.mutation_coefficient}")
        if isinstance(self.num_jobs, bool) or not isinstance(self.num_jobs, int) or self.num_jobs == 0:
            raise InvalidConfigurationError(f"num_jobs must be a non-zero integer, got {self.num_jobs!r}")

    def make_random_source(self) -> RandomSource:
        """
        Create a random source seeded with the configured seed.
        """
        return RandomSource(self.seed)
