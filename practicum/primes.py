"""Prime numbers in a range, found with the sieve of Eratosthenes."""

from __future__ import annotations


def primes_between(start: int, stop: int) -> list[int]:
    """Return the primes ``p`` with ``start <= p <= stop`` in increasing order.

    Raises ValueError when ``stop < start``, ``start < 0`` or ``stop < 2``.
    """
    if stop < start or start < 0 or stop < 2:
        raise ValueError("Enter the correct parameters!")
    prime = [True] * (stop + 1)
    prime[0] = prime[1] = False
    candidate = 2
    while candidate * candidate <= stop:
        if prime[candidate]:
            prime[candidate * candidate :: candidate] = [False] * len(
                range(candidate * candidate, stop + 1, candidate)
            )
        candidate += 1
    return [number for number in range(start, stop + 1) if prime[number]]


def print_primes(start: int, stop: int) -> None:
    """Write the primes between ``start`` and ``stop`` to standard output."""
    primes = primes_between(start, stop)
    print(f"Prime numbers from: {start}  to: {stop}")
    print("[ " + "".join(f"{p} " for p in primes) + " ]")