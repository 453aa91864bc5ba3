from esb_fireplace.adapters.input_reader import StaticInputReader, StdinReader

__all__ = [
    "StaticInputReader",
    "StdinReader",
]
