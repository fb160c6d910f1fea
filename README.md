# modcrypt

A small number-theory toolkit: modular exponentiation, prime and Fermat-test
checks for a modulus, a toy ElGamal cipher that works one character at a
time, and a solver for linear Diophantine equations `a·x + b·y = c`.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Compare two modular powers

```
modcrypt-compare [--method {classic,logarithm}]
```

Reads from standard input two bases with their exponents, a modulus and the
number of Fermat checks (whitespace-separated integers, prompting for each).
The modulus is validated with `validate_modulus`; then the tool prints either
`a1^x1 mod p = a2^x2 mod p` or `a1^x1 mod p != a2^x2 mod p`.

- `--method classic` (the default) computes the powers with `a_x_mod_p`. An
  unfit modulus is reported on standard output and the exit status is 0.
- `--method logarithm` uses `a_x_mod_p_via_log`. An unfit modulus is reported
  on standard error and the exit status is 1.

Input that is not an integer, or that ends early, gives exit status 1.

### ElGamal round trip

```
modcrypt-elgamal [--p P] [--g G] [--x X]
```

Uses the given modulus, generator and private key, or picks each at random
(`p` in 1..900, `g` in 1..300, `x` in 1..10). If `g` or `x` is not below `p`
the tool exits quietly with status 0. Otherwise it reads one word from
standard input, prints the public key `(p, g, y)`, the private key, the
ciphertext as `(a, b)` pairs and the text decrypted from it. A modulus below
3 cannot be used for encryption and gives exit status 1.

### Linear Diophantine equations

```
modcrypt-diophantine [a b c]
```

Solves `a·x + b·y = c` (by default `1256a + 847b = 119`) and prints one
solution, the general solution and a compact form of it, or `No solutions.`
when `c` is not a multiple of `gcd(a, b)`.

## Library use

```python
from modcrypt.modexp import a_x_mod_p, a_x_mod_p_via_log, mod_pow, dec_to_bin
from modcrypt.primality import is_prime, fermats_condition, validate_modulus, ModulusError
from modcrypt.compare import Method, compare_powers, format_comparison
from modcrypt.elgamal import encrypt, decrypt, public_key, format_ciphertext, parse_ciphertext
from modcrypt.diophantine import solve_diophantine

a_x_mod_p_via_log(3, 100, 7)          # 4
is_prime(23)                          # True

try:
    validate_modulus(21, 3)
except ModulusError as err:
    print(err)

equal = compare_powers(3, 100, 4, 1, 7, Method.LOGARITHM)
print(format_comparison(3, 100, 4, 1, 7, equal))   # 3^100 mod 7 = 4^1 mod 7

solution = solve_diophantine(1256, 847, 119)
print(solution.describe())
```

### Modules

- `modcrypt.modexp` — `a_x_mod_p` reduces the exponent modulo `p - 1`
  (Fermat's little theorem), so it equals the true power only for a prime `p`
  not dividing `a`; `a_x_mod_p_log_variant` is the same except that a zero
  exponent yields `a mod p`. `mod_pow` is square-and-multiply;
  `a_x_mod_p_via_log` builds a table of `a^(2^i) mod p` and combines the
  entries selected by the bits of `x` (from `dec_to_bin`, least significant
  first).
- `modcrypt.primality` — `gcd`, `is_prime` (trial division by 2, 3 and
  `6i ± 1`; note that it rejects 2 and 3 themselves), `fermats_condition`
  (Fermat's test with up to nine small bases, 2 through 23) and
  `validate_modulus`, which returns `True` or raises `ModulusError`
  (a `ValueError`).
- `modcrypt.compare` — `Method`, `compare_powers`, `format_comparison`.
- `modcrypt.elgamal` — `are_coprime`, `key_check`, `mul_mod`, `public_key`,
  `encrypt`, `decrypt`, `format_ciphertext` and `parse_ciphertext`.
  `encrypt(p, g, x, plaintext, rng=None)` returns a list of `(a, b)` pairs; the
  ephemeral key for each character comes from `rng.randrange`, so passing a
  seeded `random.Random` makes results reproducible (the default is
  `random.SystemRandom`). `decrypt` turns such pairs back into text.
- `modcrypt.diophantine` — `continued_fraction`, `euclid_gcd`,
  `compact_solution` and `solve_diophantine`, which returns a frozen
  `DiophantineSolution` (or `None` when there is no solution) whose
  `describe()` gives the text the command prints.

## What it does not do

The ElGamal code is a teaching toy: keys are tiny, characters are encrypted
one by one, and text round-trips only when every character code is below the
modulus. There is no key generation beyond the small random ranges of the
command, no key storage, and no encryption of files or byte streams.