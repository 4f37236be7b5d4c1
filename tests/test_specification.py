import pytest

from creationkit.specification import (
    AndSpecification,
    BetterFilter,
    Color,
    ColorSpecification,
    Filter,
    Product,
    ProductFilter,
    Size,
    SizeSpecification,
    Specification,
)


@pytest.fixture
def products():
    apple = Product("Apple", Color.GREEN, Size.SMALL)
    tree = Product("Tree", Color.GREEN, Size.LARGE)
    house = Product("House", Color.BLUE, Size.LARGE)
    return apple, tree, house


def test_better_filter_by_color(products):
    apple, tree, house = products
    result = BetterFilter().filter(products, ColorSpecification(Color.GREEN))
    assert [p.name for p in result] == ["Apple", "Tree"]


def test_and_operator_combines_specifications(products):
    apple, tree, house = products
    spec = ColorSpecification(Color.GREEN) & SizeSpecification(Size.LARGE)
    assert isinstance(spec, AndSpecification)
    result = BetterFilter().filter(products, spec)
    assert len(result) == 1
    assert result[0] is tree


def test_and_specification_requires_both(products):
    apple, tree, house = products
    spec = AndSpecification(ColorSpecification(Color.BLUE), SizeSpecification(Size.LARGE))
    assert spec.is_satisfied(house) is True
    assert spec.is_satisfied(tree) is False
    assert spec.is_satisfied(apple) is False


def test_product_filter_methods(products):
    apple, tree, house = products
    pf = ProductFilter()
    assert pf.by_color(products, Color.BLUE) == [house]
    assert pf.by_size(products, Size.LARGE) == [tree, house]
    assert pf.by_size_and_color(products, Size.SMALL, Color.GREEN) == [apple]
    assert pf.by_size(products, Size.MEDIUM) == []


def test_filter_agrees_with_product_filter(products):
    pf = ProductFilter()
    bf = BetterFilter()
    for color in Color:
        assert bf.filter(products, ColorSpecification(color)) == pf.by_color(products, color)
    for size in Size:
        assert bf.filter(products, SizeSpecification(size)) == pf.by_size(products, size)


def test_abstract_bases_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Filter()
    with pytest.raises(TypeError):
        Specification()