"""Run binaries inside an external environment with an enforced timeout."""
