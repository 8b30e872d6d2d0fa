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

"""pysets: Python finite-set utilities

pysets provides a hash-backed set container with explicit set-algebra
operations (union, intersection, difference) and membership helpers.

pysets.version provides a mechanism for managing stuff that is related to
releases of the entire pysets package.
"""

from pysets.version.info import version, version_info, __version__
