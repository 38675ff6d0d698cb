"""Long help texts shown by the command-line front end."""

TOOLUP_HELP = """DISCUSSION:
    toolup fetches compiler toolchains from the published release
    channels and keeps them current. Switching between the stable,
    beta and nightly compilers is a single command, and prebuilt
    standard libraries for many platforms make cross-compiling easy.

    Newcomers may want to start with `toolup doc --book`."""

SHOW_HELP = """DISCUSSION:
    Prints the active toolchain together with its compiler version.

    Extra compilation targets installed for that toolchain are
    printed too, and so is every other installed toolchain when
    there is more than one."""

SHOW_ACTIVE_TOOLCHAIN_HELP = """DISCUSSION:
    Prints only the name of the active toolchain, which makes it
    handy inside scripts.

    For the sysroot or the exact compiler version, ask the compiler
    itself."""

UPDATE_HELP = """DISCUSSION:
    Without a toolchain argument, `update` brings every installed
    toolchain up to date from its release channel and afterwards
    updates toolup.

    With a toolchain argument it updates just that one, exactly like
    `toolup toolchain install`."""

INSTALL_HELP = """DISCUSSION:
    Installs the named toolchain.

    This is another name for 'toolup update <toolchain>'."""

DEFAULT_HELP = """DISCUSSION:
    Makes the named toolchain the default one, installing it first
    when it is missing."""

TOOLCHAIN_HELP = """DISCUSSION:
    A toolchain is one complete installation of the compiler, and
    most `toolup` commands work on toolchains. The usual kind follows
    a release channel ('stable', 'beta' or 'nightly'), but toolchains
    can also come from dated archives, be built for another host, or
    point at a local build.

    Channel toolchain names are written as:

        <channel>[-<date>][-<host>]

        <channel>       = stable|beta|nightly|<version>
        <date>          = YYYY-MM-DD
        <host>          = <target-triple>

    The channel is a channel name or a version number like '1.8.0'.
    Appending a date, as in 'nightly-2017-05-09', selects the build
    archived on that day.

    A target triple as host lets you, for example, run a 32-bit
    compiler on a 64-bit system or pick the MSVC toolchain on
    Windows:

        $ toolup toolchain install stable-x86_64-pc-windows-msvc

    Parts of the triple that are left out are filled in, so this is
    the same:

        $ toolup toolchain install stable-msvc

    `toolup default` installs a toolchain and makes it the default in
    one step:

        $ toolup default stable-msvc

    Local builds can be linked in as toolchains as well; see
    `toolup toolchain help link`."""

TOOLCHAIN_LINK_HELP = """DISCUSSION:
    'toolchain' is the name the linked toolchain will go by. Any name
    works except one that reads as the start of a channel name:
    'latest' and '2017-04-01' are fine, while 'stable', 'beta-i686'
    and 'nightly-x86_64-unknown-linux-gnu' are not.

    'path' is the directory holding the toolchain's binaries and
    libraries, such as a stage directory of a compiler build:

        $ toolup toolchain link latest-stage1 build/x86_64-unknown-linux-gnu/stage1
        $ toolup override set latest-stage1

    Builds started in the current directory then use
    'latest-stage1'."""

OVERRIDE_HELP = """DISCUSSION:
    An override ties a toolchain to a directory. Whenever a proxied
    tool runs in that directory or below it, the override's toolchain
    is used instead of the default.

    Pin a nightly build:

        $ toolup override set nightly-2014-12-18

    Or a stable release:

        $ toolup override set 1.0.0

    `toolup show` reports the active toolchain, and
    `toolup override unset` drops the override again."""

OVERRIDE_UNSET_HELP = """DISCUSSION:
    With `--path`, the override for that directory is removed. With
    `--nonexistent`, overrides for directories that no longer exist
    are removed. With neither, the current directory's override is
    removed."""

RUN_HELP = """DISCUSSION:
    Runs a program with its environment set up for the given
    toolchain. Any program works, not only the compiler or the build
    tool, so toolchains can be tried without setting an override.

    Proxied tools accept `+toolchain` as their first argument as a
    shortcut; these two commands do the same thing:

        $ build-tool +nightly build

        $ toolup run nightly build-tool build"""

DOC_HELP = """DISCUSSION:
    Opens the active toolchain's documentation in the default web
    browser.

    The index page is shown unless a flag selects a particular
    document."""

COMPLETIONS_HELP = r"""DISCUSSION:
    Prints a tab-completion script for Bash, Fish, Zsh or PowerShell
    to standard output. Redirect it to a file; where that file
    belongs depends on the shell, the operating system and your own
    setup.

    BASH:

    System-wide completions usually live in `/etc/bash_completion.d/`
    and per-user ones in `~/.local/share/bash-completion/completions`:

        $ mkdir -p ~/.local/share/bash-completion/completions
        $ toolup completions bash >> ~/.local/share/bash-completion/completions/toolup

    Start a new login session to pick the script up.

    BASH (macOS/Homebrew):

    With the `bash-completion` formula installed, Homebrew keeps the
    scripts under its own prefix:

        $ mkdir -p $(brew --prefix)/etc/bash_completion.d
        $ toolup completions bash > $(brew --prefix)/etc/bash_completion.d/toolup.bash-completion

    FISH:

    Per-user scripts go into `$HOME/.config/fish/completions`:

        $ mkdir -p ~/.config/fish/completions
        $ toolup completions fish > ~/.config/fish/completions/toolup.fish

    Start a new login session to pick the script up.

    ZSH:

    Zsh loads completions from the directories in `$fpath`. A
    directory of your own is the simplest choice:

        $ mkdir ~/.zfunc

    Add it to `$fpath` in `.zshrc`, before `compinit` is called:

        fpath+=~/.zfunc

    Then write the script there:

        $ toolup completions zsh > ~/.zfunc/_toolup

    Log in again, or run `exec zsh`, for it to take effect.

    CUSTOM LOCATIONS:

    Any other place works too, as long as your shell's startup files
    load the script from there; see your shell's manual.

    POWERSHELL:

    PowerShell 5.0 or newer is needed. Check for a profile first:

        PS C:\> Test-Path $profile

    If that prints `False`, create one:

        PS C:\> New-Item -path $profile -type file -force

    Then append the script to the profile file:

        PS C:\> toolup completions powershell >> $profile

    BUILD TOOL:

    toolup can also print a script that loads the build tool's own
    completions from the default toolchain. Only some shells are
    supported:

    BASH:

        $ toolup completions bash build-tool >> ~/.local/share/bash-completion/completions/build-tool

    ZSH:

        $ toolup completions zsh build-tool > ~/.zfunc/_build-tool"""

TOOLCHAIN_ARG_HELP = (
    "Toolchain name, for example 'stable', 'nightly' or '1.8.0'. "
    "See `toolup help toolchain` for details"
)