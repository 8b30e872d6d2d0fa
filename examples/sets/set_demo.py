#  ___________________________________________________________________________
#
#  pysets: Python finite-set utilities
#  Copyright (c) 2008-2025
#  National Technology and Engineering Solutions of Sandia, LLC
#  Under the terms of Contract DE-NA0003525 with National Technology and
#  Engineering Solutions of Sandia, LLC, the U.S. Government retains certain
#  rights in this software.
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________
#
# Build a few sets, print them, and combine them.
#
from pysets import new_set, new_empty_set


def main():
    s = new_empty_set()
    s.add(1, 2, 3, 4, 4)
    print(s)
    print(s.size())
    s.clear()
    print(s)
    print(s.size())

    a = new_set(1, 2)
    b = new_set(2, 3)
    print(a, b)
    c = a.union(b)
    # a and b are unchanged by the union
    print(a, b)
    print(c)
    d = a.intersect(b)
    print(a, b)
    print(d)
    print(a.difference(b), b.difference(a))


if __name__ == '__main__':
    main()
