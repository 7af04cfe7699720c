#!/usr/bin/env python3
#
#   libmpoly : LIBrary for sparse Multivariate POLYnomial arithmetic
#
