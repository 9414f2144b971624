# fieldguard

Validators for single values, plus error types that collect what went wrong
across a whole object, including nested objects and lists of objects.

## Installation

```
pip install fieldguard
```

The only runtime dependency is `idna`. It handles internationalised domain
names in e-mail addresses and URLs.

## Validating single values

Every validator returns `True` or `False`.

```python
from fieldguard.email import validate_email
from fieldguard.urls import validate_url
from fieldguard.ip import validate_ip, validate_ip_v4, validate_ip_v6
from fieldguard.basic import validate_length, validate_range, validate_must_match, validate_required
from fieldguard.contains import validate_contains, validate_does_not_contain
from fieldguard.non_control import validate_non_control_character
from fieldguard.cards import validate_credit_card

validate_email("someone@example.com")        # True
validate_email("email@[127.0.0.1]")          # True, IP literal domains are allowed
validate_url("http://localhost:80")          # True
validate_url("http")                         # False, no scheme
validate_ip("1.1.1.1")                       # True
validate_ip_v6("::ffff:254.42.16.14")        # True
validate_length("hello", min=1, max=10)      # True
validate_length("日本", equal=2)              # True, strings count characters
validate_range(5, min=10)                    # False
validate_must_match("a", "a")                # True
validate_required(None)                      # False
validate_contains({"hey": 1}, "hey")         # True, mappings check their keys
validate_does_not_contain("hey", "o")        # True
validate_non_control_character("\x0c")       # False
validate_credit_card("zduhefljsdfKJKJZHUI")  # False
```

What each validator checks:

- `validate_email` follows the HTML form definition of an e-mail address.
  Quoted local parts are rejected. The local part may have at most 64
  characters and the domain at most 255. The domain can be a host name, a
  bracketed IPv4 or IPv6 literal, or an internationalised name that converts
  to ASCII.
- `validate_url` accepts strings that parse as absolute URLs. It checks the
  scheme, the host (including IPv6 literals and IPv4 numbers), and that the
  port is at most 65535.
- `validate_ip`, `validate_ip_v4` and `validate_ip_v6` accept plain addresses
  only. An address with a zone identifier such as `fe80::1%eth0` is rejected.
- `validate_length(value, min=None, max=None, equal=None)` works on anything
  with a length: strings, lists, tuples, sets and dicts. When `equal` is given,
  `min` and `max` are ignored.
- `validate_range(value, min=None, max=None)` treats both bounds as inclusive
  and optional.
- `validate_contains` and `validate_does_not_contain` look for a substring in
  a string, or for a key in a mapping.
- `validate_non_control_character` rejects any character in Unicode category
  `Cc`.
- `validate_credit_card` requires all the following:
  - ASCII digits only.
  - A length of 12 to 19 digits.
  - A known issuer prefix, with a length that issuer allows.
  - A valid Luhn checksum.

Some inputs raise `TypeError`:

- A non-string passed to the string validators: e-mail, URL, IP,
  control-character and card.
- A value without a length passed to `validate_length`.
- A value that is neither a string nor a mapping passed to `validate_contains`
  or `validate_does_not_contain`.

## Collecting errors

Both error types live in `fieldguard.errors`:

- `ValidationError(code, message=None, params=None)` describes one failed check.
  `add_param(name, val)` attaches details to it.
- `ValidationErrors` gathers errors per field name.

Both are exceptions, so they can be raised.

```python
from fieldguard.errors import ValidationError, ValidationErrors
from fieldguard.basic import validate_length

errors = ValidationErrors()
if not validate_length("hi!", equal=5):
    err = ValidationError("length", message="Please provide a valid foo!")
    err.add_param("value", "hi!")
    errors.add("foo", err)

print(errors)                 # foo: Please provide a valid foo!
errors.field_errors()["foo"]  # [ValidationError(code='length', ...)]
errors.is_empty()             # False
```

If an error has no message, its text is
`Validation error: <code> [<params>]`.

### Nested objects and lists

A validation outcome is either `None` (success) or a `ValidationErrors`.
The following static methods combine outcomes:

- `ValidationErrors.merge(parent, field, child)` puts a nested object's errors
  under `field`.
- `ValidationErrors.merge_all(parent, field, children)` puts the errors of a
  collection of objects under `field`, keyed by index. Each child outcome is
  expected to hold its errors under `field`, as `merge` produces them.
- `ValidationErrors.has_error(result, field)` tells whether an outcome already
  has errors for a field.

`errors()` returns the full map. Each value is one of:

- a list of `ValidationError`,
- a nested `ValidationErrors`,
- a dict from index to `ValidationErrors`.

`field_errors()` returns only the lists. Nested paths print as `bar.foo` and
`baz[0].foo`, one field per line.

Check a field's own values before its nested objects. Otherwise these calls
raise errors:

- `add` on a field that already holds nested errors raises `TypeError`.
- `merge` or `merge_all` on a field that already has an entry raises
  `ValueError`.

## Validatable objects

`fieldguard.traits` provides two abstract base classes:

- `Validate`: subclass it and implement `validate()`.
- `ValidateArgs`: subclass it and implement `validate_args(args)` when the
  checks need outside context.

By convention, the method returns when the object is valid and raises
`ValidationErrors` otherwise.

The same module has two helpers, `length_of` and `has_element`. They apply the
length and membership rules that the validators use.

## What it does not do

- There is no declarative or decorator-based way to attach rules to an
  object's fields. Each `validate()` method calls the validators itself and
  builds its own `ValidationErrors`.
- There is no phone-number validator.
- There is no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```