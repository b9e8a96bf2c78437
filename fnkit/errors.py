"""
Exceptions raised by fnkit.

Type mismatches use the built-in ``TypeError``. The only failure with its
own class is the empty-input case raised by ``head``/``last``/``tail``/
``init`` and the folds that use them.
"""


class EmptyError(ValueError):
    """An accessor that needs at least one element got an empty list or str."""
    pass
