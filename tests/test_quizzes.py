from rustdrill.lessons.quizzes import calculate_apple_price, greet, times_two


def test_apple_prices():
    assert calculate_apple_price(35) == 70
    assert calculate_apple_price(40) == 80
    assert calculate_apple_price(65) == 65


def test_returns_twice_of_positive_numbers():
    assert times_two(4) == 8


def test_returns_twice_of_negative_numbers():
    assert times_two(-4) == -8


def test_greet_world():
    assert greet("world!") == "Hello world!"


def test_greet_goodbye():
    assert greet("goodbye!") == "Hello goodbye!"