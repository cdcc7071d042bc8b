"""
Utils package.

Conventions:
- Weekday indices are "native": 0 = Sunday through 6 = Saturday, regardless
  of the week-start mode in use.
- Months handed to the date helpers are zero-based (0 = January) unless a
  function says otherwise.
- Anything that needs "now" takes an optional `clock` and falls back to
  `utils.clock.system_clock`.
"""
