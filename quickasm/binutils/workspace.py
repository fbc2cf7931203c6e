""" Temporary staging areas for the files of one pipeline run.

Each run gets its own freshly created directory, which is removed again
when the run is over:

    with acquire() as area:
        area.write('insts.s', source)
        ...

"""

import logging
import os
import shutil
import tempfile
from ..common import ResourceError


logger = logging.getLogger('workspace')


class StagingArea:
    """ An exclusively owned directory holding the artifacts of one run """
    def __init__(self, directory):
        self.directory = directory
        self.released = False

    def __repr__(self):
        return 'StagingArea({})'.format(self.directory)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        release(self)

    def path(self, name):
        """ Get the full path of an artifact in this area """
        return os.path.join(self.directory, name)

    def exists(self, name):
        return os.path.exists(self.path(name))

    def write(self, name, data):
        """ Write an artifact, either text or bytes """
        if isinstance(data, str):
            data = data.encode('utf8')
        filename = self.path(name)
        try:
            with open(filename, 'wb') as f:
                f.write(data)
        except OSError as ex:
            raise ResourceError(
                'Cannot write {}: {}'.format(filename, ex)) from ex
        return filename

    def read(self, name):
        """ Read back an artifact as bytes """
        with open(self.path(name), 'rb') as f:
            return f.read()


def acquire():
    """ Create a new, empty and uniquely named staging area """
    try:
        directory = tempfile.mkdtemp(prefix='quickasm-')
    except OSError as ex:
        raise ResourceError(
            'Cannot create staging directory: {}'.format(ex)) from ex
    logger.debug('Created staging area %s', directory)
    return StagingArea(directory)


def release(area):
    """ Remove the staging area and everything in it.

    Errors are logged but not raised, so that a result which was already
    computed still reaches the caller.
    """
    if area.released:
        return
    area.released = True
    try:
        shutil.rmtree(area.directory)
    except OSError as ex:
        logger.warning('Could not remove %s: %s', area.directory, ex)
    else:
        logger.debug('Removed staging area %s', area.directory)
