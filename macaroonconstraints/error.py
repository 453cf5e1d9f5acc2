# Copyright 2017 Canonical Ltd.
# Licensed under the LGPLv3, see LICENCE file for details.


class ConstraintError(Exception):
    '''Base class for errors raised by constraints and their checkers.'''


class CaveatFormatError(ConstraintError, ValueError):
    '''Raised when a constraint input or a caveat argument is malformed.'''


class PathConstraintSyntaxError(CaveatFormatError):
    '''Raised when a payment path predicate does not follow the grammar.'''


class PathIndexError(ConstraintError, IndexError):
    '''Raised when a path constraint index falls outside the actual path.'''


class CaveatNotSatisfied(ConstraintError):
    '''Raised by a checker when the request does not satisfy its caveat.'''


class RegisterError(Exception):
    '''Raised when a checker cannot be registered.'''


class CaveatNotRecognizedError(Exception):
    '''Containing the cause of errors returned from caveat checkers when the
    caveat was not recognized.
    '''


class VerificationError(Exception):
    '''Raised when a macaroon holds a caveat that is not satisfied.'''
