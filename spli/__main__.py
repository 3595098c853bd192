# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from .bin.spli import main


main()
