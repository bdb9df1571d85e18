"""
Collects imported DLLs and the functions pulled from them.
"""


def _decode(raw):
    if isinstance(raw, bytes):
        return raw.decode('ascii', errors='replace')
    return str(raw)


def collect_libraries(pe):
    """DLL names in import directory order, duplicates kept."""
    if not hasattr(pe, 'DIRECTORY_ENTRY_IMPORT'):
        return ()

    return tuple(_decode(entry.dll) for entry in pe.DIRECTORY_ENTRY_IMPORT)


def collect_symbols(pe):
    """Imported functions as `function:dll`, in import order.

    Imports by ordinal have no name and are left out.
    """
    if not hasattr(pe, 'DIRECTORY_ENTRY_IMPORT'):
        return ()

    symbols = []
    for entry in pe.DIRECTORY_ENTRY_IMPORT:
        dll = _decode(entry.dll)
        for imp in entry.imports:
            if imp.name:
                symbols.append(f"{_decode(imp.name)}:{dll}")

    return tuple(symbols)
