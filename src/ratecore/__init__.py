"""ratecore: off-chain reproduction of on-chain fixed-point funding, interest and payoff math."""

__version__ = "0.1.0"
