"""
Bundled species catalog.

Yields are per mature plant per year; prices are rough farm-gate prices in
USD per unit. Values are indicative only and vary with cultivar, climate
and local markets.
"""

plant_database: list[dict] = [
    # Tropical
    {
        "id": 1, "name": "Mango", "symbol": "Mg", "climate": "Tropical", "layer": "Canopy",
        "companions": ["Lemongrass", "Comfrey", "Sweet Potato"],
        "yield_per_year": 150, "unit": "kg", "market_price": 2.0, "maturity_age": 5,
        "description": "Long-lived evergreen fruit tree with a dense crown.",
        "image": "images/mango.jpg",
    },
    {
        "id": 2, "name": "Banana", "symbol": "Bn", "climate": "Tropical", "layer": "Sub-canopy",
        "companions": ["Cacao", "Sweet Potato", "Comfrey"],
        "yield_per_year": 40, "unit": "kg", "market_price": 1.2, "maturity_age": 1,
        "description": "Fast-growing herbaceous giant that fruits within a year.",
        "image": "images/banana.jpg",
    },
    {
        "id": 3, "name": "Cacao", "symbol": "Cc", "climate": "Tropical", "layer": "Shrub",
        "companions": ["Banana", "Mango"],
        "yield_per_year": 2, "unit": "kg", "market_price": 8.0, "maturity_age": 4,
        "description": "Shade-loving understory tree grown for its beans.",
        "image": "images/cacao.jpg",
    },
    {
        "id": 4, "name": "Lemongrass", "symbol": "Lg", "climate": "Tropical", "layer": "Herbaceous",
        "companions": ["Mango"],
        "yield_per_year": 5, "unit": "kg", "market_price": 4.0, "maturity_age": 1,
        "description": "Clumping aromatic grass that deters pests.",
        "image": "images/lemongrass.jpg",
    },
    {
        "id": 5, "name": "Sweet Potato", "symbol": "Sp", "climate": "Tropical", "layer": "Ground Cover",
        "companions": ["Banana"],
        "yield_per_year": 8, "unit": "kg", "market_price": 1.5, "maturity_age": 1,
        "description": "Sprawling vine used as living mulch with edible tubers.",
        "image": "images/sweet_potato.jpg",
    },
    {
        "id": 6, "name": "Passion Fruit", "symbol": "Pf", "climate": "Tropical", "layer": "Vine",
        "companions": ["Mango"],
        "yield_per_year": 15, "unit": "kg", "market_price": 3.0, "maturity_age": 2,
        "description": "Vigorous climber that uses canopy trees as trellis.",
        "image": "images/passion_fruit.jpg",
    },
    {
        "id": 7, "name": "Turmeric", "symbol": "Tm", "climate": "Tropical", "layer": "Root",
        "companions": ["Banana", "Cacao"],
        "yield_per_year": 2, "unit": "kg", "market_price": 6.0, "maturity_age": 1,
        "description": "Rhizome crop that thrives in dappled shade.",
        "image": "images/turmeric.jpg",
    },
    {
        "id": 8, "name": "Comfrey", "symbol": "Cf", "climate": "Tropical", "layer": "Herbaceous",
        "companions": ["Mango", "Banana", "Avocado", "Apple"],
        "yield_per_year": 3, "unit": "kg", "market_price": 2.0, "maturity_age": 1,
        "description": "Deep-rooted dynamic accumulator used for chop-and-drop mulch.",
        "image": "images/comfrey.jpg",
    },
    # Subtropical
    {
        "id": 9, "name": "Avocado", "symbol": "Av", "climate": "Subtropical", "layer": "Canopy",
        "companions": ["Comfrey", "Citrus"],
        "yield_per_year": 60, "unit": "kg", "market_price": 3.0, "maturity_age": 4,
        "description": "Large evergreen tree producing oil-rich fruit.",
        "image": "images/avocado.jpg",
    },
    {
        "id": 10, "name": "Citrus", "symbol": "Ct", "climate": "Subtropical", "layer": "Sub-canopy",
        "companions": ["Avocado", "Nasturtium"],
        "yield_per_year": 40, "unit": "kg", "market_price": 1.8, "maturity_age": 3,
        "description": "Small evergreen tree with fragrant blossoms.",
        "image": "images/citrus.jpg",
    },
    {
        "id": 11, "name": "Pineapple Guava", "symbol": "Pg", "climate": "Subtropical", "layer": "Shrub",
        "companions": ["Citrus"],
        "yield_per_year": 10, "unit": "kg", "market_price": 5.0, "maturity_age": 3,
        "description": "Hardy shrub with edible petals and aromatic fruit.",
        "image": "images/pineapple_guava.jpg",
    },
    {
        "id": 12, "name": "Nasturtium", "symbol": "Ns", "climate": "Subtropical", "layer": "Ground Cover",
        "companions": ["Citrus", "Grape"],
        "yield_per_year": 1, "unit": "kg", "market_price": 10.0, "maturity_age": 1,
        "description": "Edible flowering ground cover that traps aphids.",
        "image": "images/nasturtium.jpg",
    },
    {
        "id": 13, "name": "Grape", "symbol": "Gr", "climate": "Subtropical", "layer": "Vine",
        "companions": ["Nasturtium"],
        "yield_per_year": 10, "unit": "kg", "market_price": 2.5, "maturity_age": 3,
        "description": "Deciduous woody climber for arbors and tree trellises.",
        "image": "images/grape.jpg",
    },
    {
        "id": 14, "name": "Ginger", "symbol": "Gn", "climate": "Subtropical", "layer": "Root",
        "companions": ["Citrus"],
        "yield_per_year": 1.5, "unit": "kg", "market_price": 7.0, "maturity_age": 1,
        "description": "Shade-tolerant rhizome harvested after ten months.",
        "image": "images/ginger.jpg",
    },
    # Temperate
    {
        "id": 15, "name": "Walnut", "symbol": "Wn", "climate": "Temperate", "layer": "Canopy",
        "companions": [],
        "yield_per_year": 30, "unit": "kg", "market_price": 6.0, "maturity_age": 8,
        "description": "Tall nut tree; its roots suppress many neighbours.",
        "image": "images/walnut.jpg",
    },
    {
        "id": 16, "name": "Apple", "symbol": "Ap", "climate": "Temperate", "layer": "Sub-canopy",
        "companions": ["Comfrey", "Chives", "Currant"],
        "yield_per_year": 80, "unit": "kg", "market_price": 1.5, "maturity_age": 4,
        "description": "Classic orchard tree, the backbone of temperate guilds.",
        "image": "images/apple.jpg",
    },
    {
        "id": 17, "name": "Currant", "symbol": "Cr", "climate": "Temperate", "layer": "Shrub",
        "companions": ["Apple"],
        "yield_per_year": 4, "unit": "kg", "market_price": 6.0, "maturity_age": 2,
        "description": "Shade-tolerant berry bush for the orchard understory.",
        "image": "images/currant.jpg",
    },
    {
        "id": 18, "name": "Chives", "symbol": "Cv", "climate": "Temperate", "layer": "Herbaceous",
        "companions": ["Apple", "Strawberry"],
        "yield_per_year": 0.5, "unit": "kg", "market_price": 12.0, "maturity_age": 1,
        "description": "Perennial allium that repels pests around fruit trees.",
        "image": "images/chives.jpg",
    },
    {
        "id": 19, "name": "Strawberry", "symbol": "Sb", "climate": "Temperate", "layer": "Ground Cover",
        "companions": ["Chives"],
        "yield_per_year": 1, "unit": "kg", "market_price": 5.0, "maturity_age": 1,
        "description": "Low runner-forming ground cover with sweet fruit.",
        "image": "images/strawberry.jpg",
    },
    {
        "id": 20, "name": "Hardy Kiwi", "symbol": "Hk", "climate": "Temperate", "layer": "Vine",
        "companions": [],
        "yield_per_year": 20, "unit": "kg", "market_price": 4.0, "maturity_age": 5,
        "description": "Vigorous cold-hardy climber with grape-sized fruit.",
        "image": "images/hardy_kiwi.jpg",
    },
    {
        "id": 21, "name": "Horseradish", "symbol": "Hr", "climate": "Temperate", "layer": "Root",
        "companions": ["Apple"],
        "yield_per_year": 1, "unit": "kg", "market_price": 4.0, "maturity_age": 1,
        "description": "Pungent perennial root that spreads readily.",
        "image": "images/horseradish.jpg",
    },
]
