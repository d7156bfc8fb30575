from .phonetic_index import build_name_index, encode_frame, register_functions, search_name_index

__all__ = [
    "build_name_index", "search_name_index",
    "encode_frame", "register_functions",
]
