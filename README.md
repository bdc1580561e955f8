# praticas

A set of small, self-contained programming exercises packaged as a Python
library, with a command for each one that has input and output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

All commands read their input from standard input and write to standard
output. Errors are written to standard error and the command exits with
status 1.

| Command | What it does |
| --- | --- |
| `praticas-hello` | Prints `Hello World`. Takes no arguments. |
| `praticas-vogais` | Reads a word and prints each lower-case vowel that occurs in it with its count, in the order `a e i o u`. |
| `praticas-frequente` | Reads words until end of input and prints the most frequent one; ties go to the alphabetically first. Empty input is an error. |
| `praticas-complexo` | Reads an operator and two complex numbers, each given as real and imaginary part, and prints the result with two decimals. `+`, `-` and `*` do what they say; any other operator divides. |
| `praticas-vetor` | Reads a first and last index, then commands: `a <index> <value>` assigns, `v <index>` prints the value (empty if never assigned), `f` ends; any other option prints `Opção inválida!`. An index outside the range is an error. |
| `praticas-fila` | Runs queue commands: `i <value>` inserts, `r` removes, `p` / `u` print the first / last element, `t` prints the size, `v` prints `sim` or `não` for whether the queue is empty; any other command ends. Reading or removing from an empty queue is an error. |
| `praticas-jogo-da-vida [--delay SECONDS]` | Reads the number of iterations, the number of rows and columns, then pairs of live cells, and prints the board and every following generation of the Game of Life on a torus, pausing `--delay` seconds (default 0.2) between generations. For a cell outside the board it asks whether to ignore it (`s`) or stop (`n`). |

Example:

```
$ echo "banana" | praticas-vogais
a 3
$ echo "b a b c c" | praticas-frequente
b
```

`praticas-complexo` prints its prompts before the result:

```
$ printf '* 1 2 3 4\n' | praticas-complexo
Digite uma operação (+, -, *, /): 
Digite o primeiro operando: 
Digite o segundo perando operando: 
Resultado: 
-5.00 + 10.00i 
```

## Library

```python
from praticas.texto import count_vowels, most_frequent
from praticas.complexo import Complexo, format_complex
from praticas.vetor import Vetor
from praticas.fila import Fila
from praticas.pessoa import Pessoa
from praticas.jogo_da_vida import JogoDaVida, InvalidCellError

count_vowels("banana")                 # {'a': 3}
most_frequent(["b", "a", "b"])         # 'b'

z = Complexo(1, 2) * Complexo(3, 4)
print(format_complex(z))               # -5.00 + 10.00i

v = Vetor(-2, 2)
v[-2] = "first"
print(v[-2], len(v))                   # first 5

q = Fila()
q.push("a")
q.push("b")
print(q.first(), q.last(), len(q))     # a b 2
q.pop()                                # 'a'

p = Pessoa("Joao", 72)
print(p)                               # [Joao,72]
p.update("Ana", 30)

game = JogoDaVida(5, 5)
for i, j in [(1, 2), (2, 3), (3, 1), (3, 2), (3, 3)]:
    game.revive(i, j)
game.step()
print(game)

try:
    game.revive(5, 0)
except InvalidCellError as error:
    print(error.row, error.column)     # 5 0
```

Modules:

- `praticas.texto` — `hello`, `count_vowels`, `most_frequent`, and the command
  functions `hello_main`, `vowels_main`, `frequent_main`.
- `praticas.complexo` — `Complexo`, kept in polar form, with `real`, `imag`,
  `conjugate`, `negated`, `inverse` and the operators `+ - * /`;
  `format_complex`, `execute` and `main`. Inverting zero raises
  `ZeroDivisionError`.
- `praticas.vetor` — `Vetor`, a sequence of strings indexed over any inclusive
  integer range, negatives included (`ValueError` if the end is before the
  start, `IndexError` outside the range); `run` yields the output lines of a
  command stream; `main`.
- `praticas.fila` — `Fila`, a first-in first-out queue of strings with
  `first`, `last`, `is_empty`, `push`, `pop`, `len()` and iteration
  (`IndexError` on an empty queue); `run` and `main`.
- `praticas.pessoa` — `Pessoa`, a dataclass with `name` and `age`, printed as
  `[name,age]`.
- `praticas.jogo_da_vida` — `JogoDaVida`, Conway's Game of Life on a torus,
  with `rows`, `columns`, `is_alive`, `kill`, `revive`, `step`, `run` and a
  bordered text rendering; `InvalidCellError` (an `IndexError`) for cells
  outside the board; `main`.

## What it does not do

`Pessoa` is a plain record: there are no employee or teacher records built on
it, and no command prints people.