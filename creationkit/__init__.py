"""Working examples of creational design patterns and SOLID principles."""

__version__ = "0.1.0"