"""
NEAT Config Module

This module implements the Config class, which holds the parameters used by
the genome factory, the mutation operators and crossover.

Classes:
    Config: Parameters read from an INI file, with in-code defaults
"""

import configparser
import math
import os

from neatcore.activations import get_activation
from neatcore.errors      import ConfigurationError

class Config:
    """
    Configuration parameters for the genome operators.

    All parameters have defaults, so 'Config()' is usable as is. When an INI
    file is given, every key found in it overrides the matching default; keys
    that are absent keep their default value.
    """

    # Attributes holding names of activation functions; validated when set.
    _ACTIVATION_ATTRS = ('input_activation', 'output_activation', 'hidden_activation')

    # Attributes holding probabilities; validated when set.
    _PROBABILITY_ATTRS = ('weight_perturb_prob',
                          'node_add_probability',
                          'connection_add_probability',
                          'matching_gene_swap_prob')

    # Attributes holding weight factors; must be finite real numbers.
    _WEIGHT_ATTRS = ('weight_init_scale', 'weight_perturb_strength')

    NODE_POLICIES = ('larger', 'union')

    LOG_LEVELS = ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL')

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config from defaults, then from an INI file if one is given.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, only the defaults are used.

        Raises:
            FileNotFoundError:  if 'config_file' does not exist
            ConfigurationError: if a value is invalid
        """

        # [NODE]

        # Activation functions assigned to newly created nodes, by role.
        # Must be names present in the activation registry.
        self.input_activation  = 'identity'
        self.output_activation = 'sigmoid'
        self.hidden_activation = 'sigmoid'

        # [CONNECTION]

        # New connections get a weight drawn from a standard normal
        # distribution, multiplied by this factor.
        self.weight_init_scale = 6.0

        # The standard deviation of the zero-centered normal distribution
        # from which a 'weight' perturbation value is drawn. Must be >= 0.
        self.weight_perturb_strength = 1.0

        # [STRUCTURAL_MUTATIONS]

        # The probability that mutation perturbs the weight of a connection
        # (applied to each connection independently).
        self.weight_perturb_prob = 0.8

        # The probability that mutation splits a connection by adding a node.
        self.node_add_probability = 0.03

        # The probability that mutation adds a connection between two nodes.
        self.connection_add_probability = 0.05

        # Whether the add-connection mutation rejects connections that would
        # close a cycle (self-loops included). Off by default, in which case
        # recurrent topologies can appear.
        self.prevent_cycles = False

        # [CROSSOVER]

        # The probability that a gene present in both parents is taken from
        # the second parent rather than the first.
        self.matching_gene_swap_prob = 0.5

        # Which node genes the offspring inherits.
        # Allowed values:
        #   "larger" - copy the node list of the parent with more nodes
        #   "union"  - merge the node lists of both parents, keyed by node ID
        self.crossover_node_policy = 'larger'

        # [LOGGING]

        # Level used by 'configure_logging(config=...)' when no explicit level is given.
        self.log_level = 'WARNING'

        if config_file is None:
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Helper function to safely parse values, falling back on the current one
        def get_value(section, key, value_type):
            current = getattr(self, key)
            try:
                if value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                else:
                    return parser.get(section, key).strip()
            except (configparser.NoSectionError, configparser.NoOptionError):
                return current
            except ValueError as e:
                raise ConfigurationError(f"Invalid value for '{key}' in section [{section}]: {e}") from e

        self.input_activation  = get_value('NODE', 'input_activation' , str)
        self.output_activation = get_value('NODE', 'output_activation', str)
        self.hidden_activation = get_value('NODE', 'hidden_activation', str)

        self.weight_init_scale       = get_value('CONNECTION', 'weight_init_scale'      , float)
        self.weight_perturb_strength = get_value('CONNECTION', 'weight_perturb_strength', float)

        self.weight_perturb_prob        = get_value('STRUCTURAL_MUTATIONS', 'weight_perturb_prob'       , float)
        self.node_add_probability       = get_value('STRUCTURAL_MUTATIONS', 'node_add_probability'      , float)
        self.connection_add_probability = get_value('STRUCTURAL_MUTATIONS', 'connection_add_probability', float)
        self.prevent_cycles             = get_value('STRUCTURAL_MUTATIONS', 'prevent_cycles'            , bool)

        self.matching_gene_swap_prob = get_value('CROSSOVER', 'matching_gene_swap_prob', float)
        self.crossover_node_policy   = get_value('CROSSOVER', 'crossover_node_policy'  , str)

        self.log_level = get_value('LOGGING', 'log_level', str)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to validate values as they are set, so that a bad
        value fails when the configuration is built rather than when a genome
        first uses it.
        """
        if name in self._ACTIVATION_ATTRS:
            get_activation(value)
        elif name in self._PROBABILITY_ATTRS:
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"'{name}' must be in [0, 1], got {value}")
        elif name in self._WEIGHT_ATTRS:
            if not math.isfinite(value):
                raise ConfigurationError(f"'{name}' must be a finite number, got {value}")
            if name == 'weight_perturb_strength' and value < 0.0:
                raise ConfigurationError(f"'weight_perturb_strength' must be non-negative, got {value}")
        elif name == 'crossover_node_policy':
            if value not in self.NODE_POLICIES:
                raise ConfigurationError(f"'crossover_node_policy' must be one of {self.NODE_POLICIES}, got '{value}'")
        elif name == 'log_level':
            value = value.upper()
            if value not in self.LOG_LEVELS:
                raise ConfigurationError(f"'log_level' must be one of {self.LOG_LEVELS}, got '{value}'")
        super().__setattr__(name, value)
