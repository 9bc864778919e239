from .errors import (FortuneError, ResourceNotFound, MalformedIndex, UnknownCategory,
                     InvalidArgument, OutOfRange, DecodeError, InternalInconsistency)
from .index import IndexHeader, decode_index, encode_index, build_index, pack_records
from .models import Fortune, FortuneCategory, CategoryRecord
from .resources import DirectoryProvider, PackageProvider, FallbackProvider
from .store import CategoryStore, is_valid_pair

__all__ = [
    "CategoryStore", "CategoryRecord", "Fortune", "FortuneCategory", "is_valid_pair",
    "IndexHeader", "decode_index", "encode_index", "build_index", "pack_records",
    "DirectoryProvider", "PackageProvider", "FallbackProvider",
    "FortuneError", "ResourceNotFound", "MalformedIndex", "UnknownCategory",
    "InvalidArgument", "OutOfRange", "DecodeError", "InternalInconsistency",
]
