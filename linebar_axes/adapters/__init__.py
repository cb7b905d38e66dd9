from linebar_axes.adapters.normalize import data_set, normalize_series

__all__ = ["data_set", "normalize_series"]
