# patterndemos

A collection of small, self-contained demonstrations of classic
object-oriented design patterns. Each module can be imported on its own,
and most have a command that prints a short walkthrough.

| Pattern                   | Module                            | Command                         |
|---------------------------|-----------------------------------|---------------------------------|
| Builder                   | `patterndemos.builder`            | `patterndemos-builder`          |
| Decorator (pizza)         | `patterndemos.pizza`              | `patterndemos-pizza`            |
| Decorator (coffee)        | `patterndemos.coffee`             | `patterndemos-coffee`           |
| Memento (complex numbers) | `patterndemos.complex_memento`    | `patterndemos-complex-memento`  |
| Memento (product backup)  | `patterndemos.product_memento`    | —                               |
| Factory                   | `patterndemos.vehicles`           | `patterndemos-vehicles`         |
| Mediator                  | `patterndemos.chat`               | `patterndemos-chat`             |
| Iterator                  | `patterndemos.linked_queue`, `patterndemos.circular_list` | — |
| Interpreter               | `patterndemos.calculator`         | `patterndemos-calculator`       |
| Composite (building)      | `patterndemos.building`           | `patterndemos-building`         |
| Composite (pizza menu)    | `patterndemos.pizza_menu`         | `patterndemos-pizza-menu`       |
| Interpreter + Chain       | `patterndemos.request_parser`, `patterndemos.staff`, `patterndemos.customer` | `patterndemos-store` |

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running a demonstration

Each command prints its walkthrough to standard output and takes no options:

```
patterndemos-calculator
patterndemos-chat
patterndemos-store
```

## Using the modules

An integer calculator in which `*` and `/` bind tighter than `+` and `-`.
`evaluate` prints the tokens it found and returns the result:

```python
from patterndemos.calculator import Calculator

Calculator().evaluate("3 + 5 * 2")   # 13
```

Pizzas decorated with extras:

```python
from patterndemos.pizza import BasePizza, ExtraCheese, StuffedCrust

pizza = ExtraCheese(StuffedCrust(BasePizza("Supreme")))
pizza.name()    # "Supreme Pizza with Stuffed Crust with Extra Cheese"
pizza.price()
```

A linked queue with its own iterator:

```python
from patterndemos.linked_queue import Queue

queue = Queue([10, 20, 30])
queue.front()     # 10
queue.dequeue()   # 10
list(queue)       # [20, 30]
```

A circular list that can be rotated and reversed:

```python
from patterndemos.circular_list import CircularList

items = CircularList([1, 2, 3])
items.rotate_left(1)
list(items)   # [2, 3, 1]
str(items)    # "2 -> 3 -> 1 -> (back to 2)"
```

Requests interpreted and routed through a chain of store staff;
`ask_for_help` prints the conversation and returns the interpreted request:

```python
from patterndemos.customer import Customer
from patterndemos.staff import build_chain

Customer("Alice").ask_for_help("I need a new laptop", build_chain())
# "electronics:product"
```

## What it does not do

These are teaching examples. Nothing is saved between runs, the commands
read no input and accept no arguments, and the product backup example in
`patterndemos.product_memento` has no command of its own.