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

from . import common
from .version import __version__

from .common.collections import HashSet, new_set, new_empty_set
