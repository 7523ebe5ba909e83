"""Sales: the sale workflow and the transactions it records."""
