"""Reference solutions to the exercise topics, written as plain Python."""