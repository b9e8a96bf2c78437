"""
fnkit core engines

- curry: arity-aware partial application (Curried, curry, curry_n)
- equiv: structural equivalence (equivalent)
- kinds: value-kind classification and type predicates used by both
"""
