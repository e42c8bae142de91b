#!/usr/bin/env python3
from clox import main

main()
