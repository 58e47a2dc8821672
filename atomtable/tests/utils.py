import glob
from os.path import abspath, join, split


def get_fn(filename):
    """Get the full path of a file in the test files directory.

    Parameters
    ----------
    filename : str
        Name of the file to get

    Returns
    -------
    path : str
        Full path of the test file
    """
    return join(split(abspath(__file__))[0], "files", filename)


def glob_fn(pattern):
    """Get the full paths of test files matching a glob pattern."""
    return sorted(glob.glob(get_fn(pattern)))
