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

# The log should be imported first so that the pysets handler can be
# set up as soon as possible
from . import log

from . import config
from .errors import InvalidArgumentError, PysetsException
