"""Trading application layer: the trading engine use cases."""
