from rich.pretty import pprint

from golf import *

registry = Registry()

limit = registry.integer("l", "limit", 10, "limit results")
count = registry.unsigned("c", "count", 0, "how many times to ask")
verbose = registry.boolean("v", "verbose", False, "print verbose info")
servers = registry.string("s", "servers", "", "comma separated list of servers")

parser = Parser(registry, shell=True, fancy=True, colorful=True)


if __name__ == '__main__':
    parser.parse()
    pprint(parser)
    pprint({option.long: option.cell.value for option in registry})
