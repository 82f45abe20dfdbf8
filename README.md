# applab

A small collection of numerical and data-structure tools:

- **Qn fixed-point arithmetic** (`applab.fixedpoint`): `to_fixed`, `to_float`,
  `qn_multiply`, `qn_divide` and `binary_string`. The default number of
  fraction bits is `QN = 23`.
- **Square roots and quadratics** (`applab.quadratic`): `i_sqrt` (integer
  square root), `q_sqrt` (Qn square root) and `find_roots`, which solves
  `a*x^2 + b*x + c = 0` both in floating point and in 32-bit Qn arithmetic and
  returns a `Roots` tuple with `floating` and `fixed` members. Negative inputs
  and negative discriminants raise `ValueError`.
- **Qn experiments** (`applab.qn_demo`): `division_table`,
  `multiplication_result`, `polynomial_results` and `performance_comparison`,
  which compare float and 32-bit Qn results and timings.
- **Sample equations** (`applab.equations`): `func1`, `func1_deriv`, and the
  cubic `cubic` / `cubic_deriv` (roots near 35.687256, 52.632141 and
  -50.809979).
- **Fibonacci** (`applab.fibonacci`): `fib(n)`.
- **Containers**: `DynamicArray` (`applab.dynamic_array`), whose capacity grows
  by 100 entries whenever it is full, and `LinkedList` (`applab.linked_list`),
  a FIFO of words truncated to 255 characters. Both can be searched for a word.
- **Timing** (`applab.timers`): `Timer` accumulates CPU time across
  start/stop sessions, works as a context manager, and reports misuse on
  stderr; `time_repeated` runs a function repeatedly under a timer.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from applab.fixedpoint import to_fixed, to_float, qn_multiply

a = to_fixed(12.25, 3)
print(to_float(qn_multiply(a, to_fixed(2.0, 3), 3), 3))   # 24.5
```

```python
from applab.quadratic import find_roots, i_sqrt

print(i_sqrt(23425))                  # 153
roots = find_roots(1.0, 10.0, 23.0, 12)
print(roots.floating, roots.fixed)
```

```python
from applab.dynamic_array import DynamicArray
from applab.linked_list import LinkedList

words = LinkedList()
words.append("hello")
print("hello" in words)               # True
print(words.pop_front())              # hello

array = DynamicArray(1000)
array.push("hello")
print(array.search("hello"))          # hello
```

```python
from applab.timers import Timer, time_repeated

timer = Timer("work")
time_repeated(timer, 1000, lambda: sum(range(100)))
timer.report_per_iteration(1000)
```

## Command-line tools

```
applab-fib            # Fibonacci numbers 0..5
applab-fixedpoint     # floating-point epsilon check and Qn conversions in binary
applab-quadratic      # integer and Qn square roots, roots of x^2 + 10x + 23
applab-qn-demo        # Qn division, multiplication, a cubic, and a speed comparison
applab-qn-demo 100000 # the same with a shorter timing loop
```

## What this package does not do

- It has no root solvers: there is no bisection, Newton or secant routine, and
  no command that solves `func1` or the cubic. The equations in
  `applab.equations` are only the functions and their derivatives.
- It has no command that loads a word file into the containers and searches
  it; `DynamicArray` and `LinkedList` are available only as library classes.
- It has no integer (Qn) bisection solver.