"""thrust - release bookkeeping for mobile apps."""

__version__ = "0.3.0"
