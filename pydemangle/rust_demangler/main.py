from .rust_legacy import LegacyDemangler


def demangle(inp_str: str) -> str:
    """Demangle a Rust legacy symbol that has already been through the C++ demangler.

    Args:
        inp_str: The C++-demangled symbol name.

    Returns:
        The readable name without hash suffix, or inp_str unchanged if it does not look like Rust.
    """
    demangler = LegacyDemangler()
    return demangler.demangle(inp_str)
