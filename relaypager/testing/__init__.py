""" Tools for testing """

from .loaders import RecordingLoader, LoaderCall
