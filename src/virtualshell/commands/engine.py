"""
Command engine for the virtual shell.

This module owns the session's working directory and executes parsed
commands against the directory tree. Handlers raise VirtualShellError
subclasses for recoverable failures; the engine turns them into error
messages so that no command can end the session.

Supported commands:
    pwd                 print the working directory
    ls                  list the working directory's children
    mkdir <path...>     create directories, including missing parents
    cd <path>           change the working directory
    rm <path...>        remove directories and their subtrees
    session clear       discard the tree and start over at a new root
"""

import logging
from collections.abc import Callable

from virtualshell.commands.parser import CommandType, ParsedCommand, parse_command
from virtualshell.commands.path_resolver import PathResolver
from virtualshell.commands.validation import require_arguments, validate_session_argument
from virtualshell.config import ShellConfig
from virtualshell.core.directory import (
    DirectoryNode,
    attach_child,
    detach_child,
    path_from_root,
    root_of,
)
from virtualshell.core.path_utils import PathForm, parse_path
from virtualshell.core.types import CommandOutcome, ShellMessage
from virtualshell.exceptions import (
    DirectoryNotFoundError,
    EmptyListingError,
    InvalidDirectoryError,
    NotRemovableError,
    VirtualShellError,
)

logger = logging.getLogger(__name__)

Handler = Callable[[ParsedCommand], list[ShellMessage]]


def created_message(node: DirectoryNode) -> ShellMessage:
    return ShellMessage.info(f"SUCC: CREATED SUCCESSFULLY - FULL PATH: {path_from_root(node)}")


def existed_message(node: DirectoryNode) -> ShellMessage:
    return ShellMessage.info(f"ERR: ALREADY EXISTED - FULL PATH: {path_from_root(node)}")


def reached_message(node: DirectoryNode) -> ShellMessage:
    return ShellMessage.info(f"SUCC: REACHED: {path_from_root(node)}")


DELETED_MESSAGE = ShellMessage.info("SUCC: DELETED")
REACHED_ROOT_MESSAGE = ShellMessage.info("SUCC: REACHED TO ROOT DIRECTORY")


class CommandEngine:
    """
    Executes shell command lines against an in-memory directory tree.

    The engine only keeps a reference to the working directory. The root is
    always derived from it, since 'session clear' replaces the whole tree.
    """

    def __init__(self, config: ShellConfig | None = None):
        self.config = config or ShellConfig()
        self.current = self._new_root()
        self._handlers: dict[CommandType, Handler] = {
            CommandType.PWD: self._pwd,
            CommandType.LS: self._ls,
            CommandType.MKDIR: self._mkdir,
            CommandType.CD: self._cd,
            CommandType.RM: self._rm,
            CommandType.SESSION: self._session,
        }

    @property
    def root(self) -> DirectoryNode:
        return root_of(self.current)

    @property
    def cwd(self) -> str:
        """Full path of the working directory."""
        return path_from_root(self.current)

    def execute(self, line: str) -> CommandOutcome:
        """
        Run one command line.

        Params:
            line: Raw input as typed at the prompt

        Returns:
            CommandOutcome with every message the command reported, empty for
            a blank line
        """
        try:
            command = parse_command(line)
        except VirtualShellError as e:
            logger.debug("Rejected input %r: %s", line, e)
            return CommandOutcome([ShellMessage.error(str(e))])

        if command is None:
            return CommandOutcome()

        logger.debug("Executing %s", command)
        handler = self._handlers[command.command_type]
        try:
            messages = handler(command)
        except VirtualShellError as e:
            logger.debug("Command %s failed: %s", command, e)
            messages = [ShellMessage.error(str(e))]
        return CommandOutcome(messages)

    def _new_root(self) -> DirectoryNode:
        return DirectoryNode(name=self.config.root_label)

    def _move_to(self, node: DirectoryNode) -> None:
        self.current = node
        logger.debug("Working directory is now %s", path_from_root(node))

    def _pwd(self, command: ParsedCommand) -> list[ShellMessage]:
        return [ShellMessage.info(f"PATH: {self.cwd}")]

    def _ls(self, command: ParsedCommand) -> list[ShellMessage]:
        names = self.current.child_names()
        if not names:
            raise EmptyListingError(self.cwd)
        return [ShellMessage.info("DIRS: " + " ".join(names))]

    def _mkdir(self, command: ParsedCommand) -> list[ShellMessage]:
        messages = []
        for argument in require_arguments(command):
            messages.extend(self._make_directory(argument))
        return messages

    def _make_directory(self, argument: str) -> list[ShellMessage]:
        path = parse_path(argument)

        if path.form is PathForm.SIMPLE:
            existing = self.current.find_child(argument)
            if existing is not None:
                return [existed_message(existing)]
            node = attach_child(self.current, DirectoryNode(name=argument))
            logger.debug("Created %s", path_from_root(node))
            return [created_message(node)]

        start = PathResolver.anchor(path, self.current)
        if not path.segments:
            # nothing but separators, the root itself
            return [existed_message(start)]

        messages = []
        for step in PathResolver.walk_or_create(start, path.segments):
            if step.created:
                logger.debug("Created %s", path_from_root(step.node))
                messages.append(created_message(step.node))
            else:
                messages.append(existed_message(step.node))
        return messages

    def _cd(self, command: ParsedCommand) -> list[ShellMessage]:
        argument = require_arguments(command)[0]
        path = parse_path(argument)

        if path.form is PathForm.SIMPLE:
            target = self.current.find_child(argument)
            if target is None:
                raise InvalidDirectoryError(argument)
            self._move_to(target)
            return [reached_message(target)]

        if path.is_anchored and path.is_root_only:
            self._move_to(self.root)
            return [REACHED_ROOT_MESSAGE]

        visited = PathResolver.resolve(path, self.current)
        messages = []
        for node in visited:
            self._move_to(node)
            messages.append(reached_message(node))
        return messages

    def _rm(self, command: ParsedCommand) -> list[ShellMessage]:
        messages = []
        for argument in require_arguments(command):
            try:
                self._remove_directory(argument)
            except VirtualShellError as e:
                logger.debug("Could not remove %r: %s", argument, e)
                messages.append(ShellMessage.error(str(e)))
            else:
                messages.append(DELETED_MESSAGE)
        return messages

    def _remove_directory(self, argument: str) -> None:
        path = parse_path(argument)

        if path.form is PathForm.SIMPLE:
            target = self.current.find_child(argument)
            if target is None:
                raise DirectoryNotFoundError(argument)
        else:
            target = PathResolver.resolve(path, self.current)[-1]

        if not PathResolver.is_removable(target, self.current):
            raise NotRemovableError(path_from_root(target))

        full_path = path_from_root(target)
        if not detach_child(target.parent, target):
            raise DirectoryNotFoundError(argument)
        logger.debug("Removed %s", full_path)

    def _session(self, command: ParsedCommand) -> list[ShellMessage]:
        validate_session_argument(command)
        self.current = self._new_root()
        logger.debug("Session cleared")
        return [ShellMessage.info(f"SUCC: RESET TO ROOT {self.config.root_label}")]
