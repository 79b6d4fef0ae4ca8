import os
import tqdm


class Logger:
    """
    Class for logging solver output to the console and to a file

    Parameters
    ----------
    `log_dir` : str
        directory for logging
    `log_filename` : str
        name of file to save logging, no file logging if empty
    `clear` : bool
        whether clear logging file on start
    `pbar` : tqdm, optional
        progress bar to write messages through
    """
    def __init__(self, log_dir : str = '', log_filename : str = '', clear : bool = False, pbar : tqdm.tqdm = None):
        self.pbar     = pbar
        self.path     = log_dir
        self.filename = log_filename
        self.filepath = os.path.join(log_dir, log_filename) if log_filename else ''
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        if self.filepath and clear:
            open(self.filepath, 'w').close()

    def tqdmlog(self, message : str, pbar : tqdm.tqdm = None, to_file : bool = False, attention : bool = False, add_iter_num : bool = False):
        """
        Log message without breaking tqdm progress bar

        Parameters
        ----------
        `message` : str
            Message to log
        `pbar` : tqdm, optional
            tqdm progress bar to write
        `to_file` : bool, optional
            whether save log message in file
        `attention` : bool, optional
            whether surround message with '=' lines
        `add_iter_num` : bool, optional
            whether add iteration number of progress bar as prefix
        """
        pbar = pbar if self.pbar is None else self.pbar
        if add_iter_num and pbar is not None:
            message = f'{pbar.n:5} | {message}'
        if to_file:
            self.filelog(message)
        write = pbar.write if pbar is not None else tqdm.tqdm.write
        if attention:
            write('='*len(message))
        write(message)
        if attention:
            write('='*len(message))

    def filelog(self, message : str, filepath : str = None):
        """
        Append message to file

        Parameters
        ----------
        `message` : str
            message to log
        `filepath`: str, optional
            Path to file, logger file by default
        """
        filepath = filepath if filepath is not None else self.filepath
        if filepath:
            with open(filepath, 'a') as f:
                f.write(message + '\n')

    def cubelog(self, title : str, cube, pbar : tqdm.tqdm = None, to_file : bool = True):
        """
        Log a title line followed by the unfolded net of the cube

        Parameters
        ----------
        `title` : str
            line printed above the net
        `cube` : ECube
            cube to draw, its `str` is the net
        """
        self.tqdmlog(f'{title}\n{cube}', pbar=pbar, to_file=to_file)
