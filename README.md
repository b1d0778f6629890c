# cppnine

Three small command-line tools: `btc`, `rpn` and `pmergeme`.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## btc

Looks up the bitcoin price for each date in an input file and prints the
value of the amount given for that date.

    btc input.txt

The price database is read from `data.csv` in the current directory. Its
first line is a header, and every other line has the form `date,price`. If a
date appears more than once, the first entry is kept. A line with no comma,
or a price that is not a number, is reported on standard error.

The input file must begin with the header `date | value`, followed by lines
such as:

    2011-01-03 | 3
    2012-01-11 | 1.5

Whitespace other than newlines is ignored. Each valid line prints
`date => amount = value` on standard output. If the database has no entry
for a date, the price on the closest earlier date is used. The following are
reported on standard error, and processing moves on to the next line:

- a line with no `|`, or a date that is not a real `YYYY-MM-DD` calendar date
  from 2009 onwards: `Error: bad input => ...`
- a negative amount: `Error: not a positive number.`
- an amount above 1000: `Error: too large a number.`

If the header is wrong, `Error: desired format => date | value.` is printed
and nothing else is read. If the database has no date on or before an input
date, the command reports the error and exits with status 1. Called with
anything other than exactly one argument, it prints `bad input`.

From Python:

    import io
    from cppnine.bitcoin_exchange import BitcoinExchange, is_valid_date

    exchange = BitcoinExchange()
    exchange.load_database("data.csv")
    print(exchange.find_value("2011-01-03"))

    out, err = io.StringIO(), io.StringIO()
    exchange.process_input("input.txt", out, err)

    is_valid_date("2012-02-29")   # True

`find_value` raises `LookupError` when no date on or before the one given is
in the database. The module also provides `parse_value`, `remove_whitespace`,
`check_amount` and `is_leap_year`.

## rpn

Evaluates an expression in reverse Polish notation. Operands are single
digits from 0 to 9, and the operators are `+ - * /`. Division is integer
division that truncates toward zero.

    rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
    42

An invalid expression, a division by zero or a number of 10 or more prints
`Error` on standard error.

    from cppnine.rpn import evaluate, apply_operation, RPNError

    evaluate("1 2 * 2 / 2 * 2 4 - +")   # 0
    apply_operation(-7, 2, "/")         # -3

`evaluate` raises `RPNError` for any expression it cannot evaluate.

## pmergeme

Sorts a sequence of positive integers with a merge sort and reports how long
the sort took, once on a list and once on a deque.

    pmergeme 3 5 9 7 4

The output shows the numbers before and after sorting, followed by two lines
giving the time of each sort in microseconds. An argument that is not a
positive integer prints `Error` and the command exits with status 1.

    from cppnine.pmergeme import merge_insert_sort, merge, parse_numbers

    merge_insert_sort([3, 5, 9, 7, 4])   # [3, 4, 5, 7, 9]
    merge([1, 4], [2, 3])                # [1, 2, 3, 4]
    parse_numbers(["3", "5"])            # [3, 5]

`parse_numbers` raises `ValueError` for a value that is not positive.
`format_container` renders a message followed by the values, as printed by
the command.