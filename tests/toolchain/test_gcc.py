"""
Tests for GCC-compatible toolchain selection.
"""

import pytest

from targetkit.core.exceptions import ConfigError
from targetkit.core.platform import OperatingSystem, Platform
from targetkit.core.search_path import ToolSearchPath
from targetkit.toolchain.gcc import (
    ClangToolChain,
    GccCompatibleToolChain,
    GccToolChain,
    create_toolchain,
)
from targetkit.toolchain.tools import ToolSet, ToolType, append_arguments
from tests.fixtures.locators import FakeLocator

COMPILERS_AND_LINKER = [
    ToolType.C_COMPILER,
    ToolType.CPP_COMPILER,
    ToolType.OBJECTIVEC_COMPILER,
    ToolType.OBJECTIVECPP_COMPILER,
    ToolType.LINKER,
]


@pytest.fixture
def linux_gcc(all_tools_locator):
    return GccToolChain("gcc", host="linux", search_path=all_tools_locator)


class TestDefaults:
    def test_gcc_default_tools(self, linux_gcc):
        provider = linux_gcc.select(Platform.of("native", os="linux"))

        executables = {tool.name: tool.executable for tool in provider.tool_set}
        assert executables == {
            "c_compiler": "gcc",
            "cpp_compiler": "g++",
            "objc_compiler": "gcc",
            "objcpp_compiler": "g++",
            "linker": "g++",
            "assembler": "as",
            "static_lib_archiver": "ar",
        }

    def test_clang_default_tools(self, all_tools_locator):
        clang = ClangToolChain("clang", host="linux", search_path=all_tools_locator)
        provider = clang.select(Platform.of("native", os="linux"))

        assert provider.tool(ToolType.C_COMPILER).executable == "clang"
        assert provider.tool(ToolType.CPP_COMPILER).executable == "clang++"
        assert provider.tool(ToolType.LINKER).executable == "clang++"
        assert provider.tool(ToolType.STATIC_LIB_ARCHIVER).executable == "ar"

    def test_display_name(self, linux_gcc):
        assert linux_gcc.display_name == "Tool chain 'gcc' (GNU GCC)"

    def test_default_search_path(self):
        gcc = GccToolChain("gcc", host="linux")
        assert isinstance(gcc.search_path, ToolSearchPath)
        assert gcc.path == []

    def test_add_path(self, tmp_path):
        gcc = GccToolChain("gcc", host="linux")
        gcc.add_path(tmp_path / "a", tmp_path / "b")
        assert gcc.path == [tmp_path / "a", tmp_path / "b"]

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            GccCompatibleToolChain("abstract", host="linux")


class TestStructuralMismatch:
    @pytest.mark.parametrize("os_name", ["windows", "macos", "freebsd"])
    @pytest.mark.parametrize("arch", [None, "x86", "x86-64", "arm"])
    def test_other_os_is_unavailable(self, linux_gcc, all_tools_locator, os_name, arch):
        platform = Platform.of("foreign", os=os_name, arch=arch)

        provider = linux_gcc.select(platform)

        assert not provider.is_available
        assert provider.reasons == ["Don't know how to build for platform 'foreign'."]
        assert all_tools_locator.calls == []

    def test_other_architecture_is_unavailable(self, linux_gcc):
        provider = linux_gcc.select(Platform.of("arm", os="linux", arch="arm64"))
        assert provider.reasons == ["Don't know how to build for platform 'arm'."]

    def test_amd64_unsupported_on_windows_host(self, all_tools_locator):
        gcc = GccToolChain("mingw", host="windows", search_path=all_tools_locator)

        provider = gcc.select(Platform.of("win64", os="windows", arch="x86-64"))

        assert provider.reasons == ["Don't know how to build for platform 'win64'."]

    def test_i386_supported_on_windows_host(self, all_tools_locator):
        gcc = GccToolChain("mingw", host="windows", search_path=all_tools_locator)

        provider = gcc.select(Platform.of("win32", os="windows", arch="x86"))

        assert provider.is_available
        assert provider.tool(ToolType.C_COMPILER).arguments == ("-m32",)


class TestArchitectureArguments:
    def test_x86_64_on_linux(self, linux_gcc):
        provider = linux_gcc.select(Platform.of("linux64", os="linux", arch="amd64"))

        for tool_type in COMPILERS_AND_LINKER:
            assert provider.tool(tool_type).arguments == ("-m64",)
        assert provider.tool(ToolType.ASSEMBLER).arguments == ("--64",)
        assert provider.tool(ToolType.STATIC_LIB_ARCHIVER).arguments == ()

    def test_x86_64_on_macos(self, all_tools_locator):
        clang = ClangToolChain("clang", host="macos", search_path=all_tools_locator)

        provider = clang.select(Platform.of("mac64", os="macos", arch="x86_64"))

        assert provider.tool(ToolType.CPP_COMPILER).arguments == ("-m64",)
        assert provider.tool(ToolType.ASSEMBLER).arguments == ("-arch", "x86_64")

    def test_x86_on_linux(self, linux_gcc):
        provider = linux_gcc.select(Platform.of("linux32", os="linux", arch="i386"))

        for tool_type in COMPILERS_AND_LINKER:
            assert provider.tool(tool_type).arguments == ("-m32",)
        assert provider.tool(ToolType.ASSEMBLER).arguments == ("--32",)

    def test_tool_chain_default_adds_nothing(self, linux_gcc):
        provider = linux_gcc.select(Platform.of("native", os="linux"))
        assert all(tool.arguments == () for tool in provider.tool_set)

    def test_hooks_append_after_strategy(self, linux_gcc):
        linux_gcc.each_platform(
            lambda tools: tools.configure(ToolType.LINKER, append_arguments("-s"))
        )
        provider = linux_gcc.select(Platform.of("linux64", os="linux", arch="amd64"))

        assert provider.tool(ToolType.LINKER).arguments == ("-m64", "-s")


class TestCustomTargets:
    def test_custom_platform_matches_after_builtins(self, linux_gcc):
        linux_gcc.target(
            "custom-os",
            lambda tools: tools.configure(
                ToolType.C_COMPILER, append_arguments("-mcustom")
            ),
        )

        provider = linux_gcc.select(Platform.of("custom-os", os="custom", arch="mips"))

        assert provider.is_available
        assert provider.tool(ToolType.C_COMPILER).arguments == ("-mcustom",)

    def test_target_without_action(self, linux_gcc):
        strategy = linux_gcc.target("custom-os")

        provider = linux_gcc.select(Platform.of("custom-os", os="custom"))

        assert strategy.action is None
        assert provider.is_available
        assert all(tool.arguments == () for tool in provider.tool_set)

    def test_target_list_of_names(self, linux_gcc):
        linux_gcc.target(["board-a", "board-b"])
        assert linux_gcc.select(Platform.of("board-b", os="rtos")).is_available

    def test_custom_overrides_builtin(self, linux_gcc):
        linux_gcc.target("linux32")

        provider = linux_gcc.select(Platform.of("linux32", os="linux", arch="x86"))

        assert provider.tool(ToolType.C_COMPILER).arguments == ()

    def test_latest_registration_wins(self, linux_gcc):
        linux_gcc.target(
            "board",
            lambda tools: tools.configure(ToolType.LINKER, append_arguments("-old")),
        )
        linux_gcc.target(
            "board",
            lambda tools: tools.configure(ToolType.LINKER, append_arguments("-new")),
        )

        provider = linux_gcc.select(Platform.of("board", os="rtos"))

        assert provider.tool(ToolType.LINKER).arguments == ("-new",)

    def test_action_can_replace_executable(self, all_tools_locator):
        all_tools_locator.found.add("arm-none-eabi-gcc")
        gcc = GccToolChain("arm", host="linux", search_path=all_tools_locator)

        def use_cross_compiler(tools):
            tools[ToolType.C_COMPILER].executable = "arm-none-eabi-gcc"

        gcc.target("arm-board", use_cross_compiler)

        provider = gcc.select(Platform.of("arm-board", os="none", arch="arm"))

        assert provider.tool(ToolType.C_COMPILER).command_line() == ["arm-none-eabi-gcc"]

    def test_hooks_run_in_registration_order(self, linux_gcc):
        order = []
        linux_gcc.each_platform(lambda tools: order.append("first"))
        linux_gcc.each_platform(lambda tools: order.append("second"))

        linux_gcc.select(Platform.of("native", os="linux"))

        assert order == ["first", "second"]


class TestAvailability:
    def test_nothing_found_names_c_compiler(self, no_tools_locator):
        gcc = GccToolChain("gcc", host="linux", search_path=no_tools_locator)

        provider = gcc.select(Platform.of("native", os="linux"))

        assert not provider.is_available
        assert provider.reasons == ["Could not find C compiler 'gcc' in system path."]

    def test_nothing_found_names_configured_c_compiler(self, no_tools_locator):
        gcc = GccToolChain("gcc", host="linux", search_path=no_tools_locator)
        gcc.each_platform(
            lambda tools: setattr(tools[ToolType.C_COMPILER], "executable", "cc")
        )

        provider = gcc.select(Platform.of("native", os="linux"))

        assert "'cc'" in provider.explain_unavailability()

    def test_replacement_tool_set_without_c_compiler(self, no_tools_locator):
        gcc = GccToolChain("gcc", host="linux", search_path=no_tools_locator)

        def linker_only(tools):
            replacement = ToolSet(tools.platform)
            replacement.add(ToolType.LINKER, "ld")
            return replacement

        gcc.each_platform(linker_only)

        provider = gcc.select(Platform.of("native", os="linux"))

        assert not provider.is_available
        assert provider.reasons == [
            "No C compiler is configured for platform 'native'."
        ]

    def test_only_c_compiler_found(self):
        gcc = GccToolChain("gcc", host="linux", search_path=FakeLocator({"gcc"}))
        assert gcc.select(Platform.of("native", os="linux")).is_available

    def test_missing_objc_still_available(self):
        locator = FakeLocator({"gcc", "g++", "as", "ar"})
        gcc = GccToolChain("gcc", host="linux", search_path=locator)

        def no_objc(tools):
            tools[ToolType.OBJECTIVEC_COMPILER].executable = "missing-objc"

        gcc.each_platform(no_objc)

        assert gcc.select(Platform.of("native", os="linux")).is_available

    def test_real_search_path(self, mock_tool_dir):
        gcc = GccToolChain("gcc", host="linux")
        gcc.add_path(mock_tool_dir)

        provider = gcc.select(Platform.of("native", os="linux"))

        assert provider.is_available
        assert provider.locate_tool(ToolType.C_COMPILER).path == mock_tool_dir / "gcc"

    def test_real_search_path_missing(self, tmp_path):
        gcc = GccToolChain("gcc", host="linux")
        gcc.add_path(tmp_path)

        provider = gcc.select(Platform.of("native", os="linux"))

        assert provider.reasons == [
            f"Could not find C compiler 'gcc'. Searched in: {tmp_path}"
        ]


class TestProviderProperties:
    def test_object_suffix_windows(self, all_tools_locator):
        gcc = GccToolChain("mingw", host="windows", search_path=all_tools_locator)
        provider = gcc.select(Platform.of("win", os="windows"))
        assert provider.object_file_suffix == ".obj"

    @pytest.mark.parametrize("os_name", ["linux", "rtos"])
    def test_object_suffix_other(self, linux_gcc, os_name):
        linux_gcc.target("custom")
        provider = linux_gcc.select(Platform.of("custom", os=os_name))
        assert provider.object_file_suffix == ".o"

    def test_object_suffix_follows_target_not_host(self, linux_gcc):
        linux_gcc.target("cross-win")
        provider = linux_gcc.select(Platform.of("cross-win", os="windows", arch="x86"))
        assert provider.object_file_suffix == ".obj"

    def test_command_file_default(self, linux_gcc):
        provider = linux_gcc.select(Platform.of("native", os="linux"))
        assert provider.supports_command_file is True

    def test_command_file_policy_override(self, all_tools_locator):
        class NoCommandFileToolChain(GccToolChain):
            def can_use_command_file(self):
                return False

        gcc = NoCommandFileToolChain("gcc", host="linux", search_path=all_tools_locator)
        provider = gcc.select(Platform.of("native", os="linux"))

        assert provider.supports_command_file is False


class TestIdempotence:
    def test_repeated_select_does_not_accumulate(self, linux_gcc):
        linux_gcc.each_platform(
            lambda tools: tools.configure(ToolType.C_COMPILER, append_arguments("-g"))
        )
        platform = Platform.of("linux64", os="linux", arch="x86-64")

        first = linux_gcc.select(platform)
        second = linux_gcc.select(platform)

        assert first.tool_set is not second.tool_set
        assert first.tool_set.arguments_by_tool() == second.tool_set.arguments_by_tool()
        assert second.tool(ToolType.C_COMPILER).arguments == ("-m64", "-g")

    def test_select_leaves_registry_untouched(self, linux_gcc):
        linux_gcc.target("custom")
        before = linux_gcc.strategies.strategies

        linux_gcc.select(Platform.of("custom", os="rtos"))
        linux_gcc.select(Platform.of("foreign", os="windows"))

        assert linux_gcc.strategies.strategies == before


class TestCreateToolchain:
    def test_gcc(self):
        toolchain = create_toolchain("gcc", host="linux")
        assert isinstance(toolchain, GccToolChain)
        assert toolchain.name == "gcc"

    def test_clang_with_name(self):
        toolchain = create_toolchain("clang", "clang-17", host=OperatingSystem("macos"))
        assert isinstance(toolchain, ClangToolChain)
        assert toolchain.name == "clang-17"
        assert toolchain.host.is_macos

    def test_unknown_type(self):
        with pytest.raises(ConfigError, match="Invalid toolchain type: msvc"):
            create_toolchain("msvc")
