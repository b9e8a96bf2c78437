"""
Pytest configuration for fnkit tests.

Provides:
- Hypothesis profiles for property tests (select with HYPOTHESIS_PROFILE)
- Shared strategies for nested values
"""

import os

from hypothesis import settings, strategies as st

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# NOTE: Do NOT set database=None - that DISABLES the example database.

settings.register_profile(
    "default",
    print_blob=True,  # Print reproduction blob on failure
    derandomize=False,
)

settings.register_profile(
    "ci",
    print_blob=True,
    derandomize=True,
    max_examples=300,
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


# =============================================================================
# Shared Strategies
# =============================================================================

scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**53), max_value=2**53),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=20),
    st.binary(max_size=8),
)

field_names = st.text(
    alphabet=st.characters(min_codepoint=ord("a"), max_codepoint=ord("z")),
    min_size=1,
    max_size=6,
)

nested_values = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.tuples(children, children),
        st.dictionaries(field_names, children, max_size=4),
    ),
    max_leaves=20,
)
