# creationkit

Compact, working examples of the creational design patterns and the SOLID
principles. Each one is in its own module and has its own tests. The package
has no dependencies beyond the standard library.

## Installation

```
pip install .
pip install ".[test]"   # adds pytest
```

## What is inside

| Module | Pattern or principle | Main names |
| --- | --- | --- |
| `creationkit.journal` | Single responsibility | `Journal`, `PersistenceManager` |
| `creationkit.specification` | Open/closed, specification filter | `Product`, `Color`, `Size`, `ProductFilter`, `BetterFilter`, `ColorSpecification`, `SizeSpecification`, `AndSpecification` |
| `creationkit.shapes` | Liskov substitution | `Rectangle`, `Square`, `RectangleFactory`, `process` |
| `creationkit.html` | Nested HTML builder | `Tag`, `P`, `IMG` |
| `creationkit.maybe` | Maybe monad | `maybe`, `Maybe`, `print_house_name` |
| `creationkit.singleton` | Singleton, monostate, per-thread singleton | `SingletonDatabase`, `DummyDatabase`, `SingletonRecordFinder`, `ConfigurableRecordFinder`, `SingletonTester`, `MonostatePrinter`, `PerThreadSingleton` |
| `creationkit.multiton` | Multiton | `Multiton`, `Importance`, `Printer` |
| `creationkit.builder` | Faceted builder | `Person`, `PersonBuilder`, `PersonAddressBuilder`, `PersonJobBuilder` |
| `creationkit.prototype` | Prototype, deep copy | `Address`, `Contact`, `EmployeeFactory`, `clone`, `Point`, `Line` |
| `creationkit.drinks` | Abstract factory | `HotDrink`, `Tea`, `Coffee`, `HotDrinkFactory`, `CoffeeFactory`, `DrinkWithVolumeFactory` |
| `creationkit.points` | Factory method | `Point`, `PointType` |
| `creationkit.walls` | Factories with validation | `Wall`, `BasicWallFactory`, `SolidWall`, `WallFactory`, `WallType`, `Material`, `Point2D` |

## Examples

Filtering with combined specifications:

```python
from creationkit.specification import (
    BetterFilter, Color, ColorSpecification, Product, Size, SizeSpecification,
)

items = [
    Product("Apple", Color.GREEN, Size.SMALL),
    Product("Tree", Color.GREEN, Size.LARGE),
    Product("House", Color.BLUE, Size.LARGE),
]
spec = ColorSpecification(Color.GREEN) & SizeSpecification(Size.LARGE)
print([p.name for p in BetterFilter().filter(items, spec)])  # ['Tree']
```

Building a person through builder facets:

```python
from creationkit.builder import Person

person = (
    Person.create()
    .lives().at("123 London Road").with_postcode("SW1 1GB").in_("London")
    .works().at("PragmaSoft").as_a("Consultant").earning(10_000_000)
    .build()
)
print(person)
```

Making points with factory methods:

```python
from creationkit.points import Point

p = Point.new_cartesian(2, 3)
q = Point.new_polar(1.0, 0.0)
```

Walking a chain of optional attributes:

```python
from creationkit.maybe import Address, Person, print_house_name

print_house_name(Person(Address("name")))  # prints "name"
print_house_name(Person())                 # prints nothing
```

## Behaviour worth knowing

- `Journal.add` numbers entries with one counter shared by all journals.
  `Journal.save` and `PersistenceManager.save` write the entries to a text
  file, one per line.
- `SingletonDatabase.get()` reads `capitals.txt` from the current directory
  once, as alternating lines of capital name and population. If the file
  cannot be opened, the database is empty, and unknown names have a
  population of 0. The package ships no such file. `DummyDatabase` holds
  `alpha`, `beta` and `gamma` with populations 1, 2 and 3.
- `Multiton.get(key)` returns one instance per key, and each subclass keeps
  its own registry.
- `SolidWall` raises `ValueError` for aerated concrete below ground level and
  for brick narrower than 120. `WallFactory.create_main` returns `None`
  instead of a wall below ground level.
- `DrinkWithVolumeFactory.make_drink` only knows `"tea"`. Any other name
  raises `KeyError`.

## Command line

The wall-factory demonstration can be run as a command:

```
creationkit-walls
```

It creates a main wall, tries to create one below ground level (which is
refused), then creates two partition walls and a basic wall, printing each
one.

## What it does not do

- `Wall.intersects` always returns `False`, so `WallFactory.create_partition`
  never refuses a wall for overlapping another.
- There is no dependency-injection container. Wiring is done by hand, for
  example by passing a `Database` to `ConfigurableRecordFinder`.

## Running the tests

```
pytest
```