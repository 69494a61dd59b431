"""Run the sample with ``python -m pgadapter_sample``."""

from pgadapter_sample.application import main

main()
