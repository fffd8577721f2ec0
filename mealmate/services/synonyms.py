from typing import Dict, List, Optional, Set
from mealmate.core.rules import INGREDIENT_VARIANTS


def ingredient_variants(term: str, table: Optional[Dict[str, List[str]]] = None) -> Set[str]:
    """Resolve an ingredient or pantry name to all of its known names.

    Args:
        term: Lower-cased, trimmed ingredient name.
        table: Variant table to use; defaults to the bundled one.

    Returns:
        The term itself plus the key and every alias of each table entry where
        the term contains the key/alias or the key/alias contains the term.

    Notes:
        - Containment is plain substring, no word boundaries ("egg" also
          pulls in "eggplant" entries).
    """
    variants = {term}
    if not term:
        return variants

    for key, aliases in (table if table is not None else INGREDIENT_VARIANTS).items():
        names = [key, *aliases]
        if any(name in term or term in name for name in names):
            variants.update(names)
    return variants
