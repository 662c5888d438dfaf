def secure_check(candidate: bytes, stored: bytes) -> bool:
    """Compare two byte strings in constant time to avoid timing attacks.

    Every byte pair is visited even after a mismatch, so the running time does
    not depend on where the inputs differ. Inputs of different length return
    False straight away: this leaks the length, never the content, and digest
    lengths are fixed and public for a given algorithm.
    """
    if len(candidate) != len(stored):
        return False

    acc = 0
    for c, s in zip(candidate, stored):
        acc |= c ^ s
    return acc == 0
