"""Run-time system configuration values."""

SC_PAGESIZE = 0x0027
SC_PAGE_SIZE = SC_PAGESIZE

PAGE_SIZE = 4096


def sysconf(name: int) -> int:
    """Return the configuration value for ``name``.

    Raises ValueError for a name the system does not know.
    """
    if name == SC_PAGESIZE:
        return PAGE_SIZE
    raise ValueError(f"unknown sysconf name: {name:#x}")