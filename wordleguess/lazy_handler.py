import os
import glob
import logging
import tempfile
from logging.handlers import RotatingFileHandler

logger = logging.getLogger(__name__)


class LazyRotatingFileHandler(RotatingFileHandler):
    """RotatingFileHandler writing into a private directory under the system
    temp dir. A directory left by an earlier run is reused when it is still
    owned by us, mode 0700 and free of symlinks.
    """

    def __init__(self, tmpdir_prefix='', basename=None, *args, **kwargs):
        self.base_dir = self._create_temp_dir(tmpdir_prefix)
        kwargs['filename'] = os.path.join(self.base_dir, basename)
        kwargs.setdefault('delay', True)
        super().__init__(*args, **kwargs)

    @staticmethod
    def _tmpdir_usable(path):
        st = os.lstat(path)
        if not os.path.isdir(path) or os.path.islink(path):
            return False
        if st.st_uid != os.getuid() or (st.st_mode & 0o777) != 0o700:
            return False
        for item in os.listdir(path):
            if os.path.islink(os.path.join(path, item)):
                return False
        return True

    @classmethod
    def _create_temp_dir(cls, tmpdir_prefix):
        existing_dirs = []
        if tmpdir_prefix:
            existing_dirs.extend(sorted(glob.glob(os.path.join(tempfile.gettempdir(), f"{tmpdir_prefix}*"))))

        for dir_ in existing_dirs:
            if cls._tmpdir_usable(dir_):
                logger.debug(f"Using existing log directory: {dir_}")
                return dir_

        # mkdtemp already creates the directory with mode 0700
        base_dir = tempfile.mkdtemp(prefix=tmpdir_prefix)
        logger.debug(f"Created new log directory: {base_dir}")
        return base_dir
