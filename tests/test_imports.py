"""
Import tests for all PyFastNoise modules and submodules.

These tests ensure that all modules can be imported without errors,
which is crucial for detecting import-related issues early.
"""
import pytest


class TestMainPackageImports:
    """Test imports for the main pyfastnoise package."""

    @pytest.mark.importtest
    def test_main_package_import(self):
        """Test that the main pyfastnoise package can be imported."""
        import pyfastnoise
        assert hasattr(pyfastnoise, '__version__') or hasattr(pyfastnoise, '__all__')

    @pytest.mark.importtest
    def test_constants_import(self):
        """Test that constants module can be imported."""
        import pyfastnoise.constants
        assert pyfastnoise.constants.DEFAULT_TABLE_SIZE == 256

    @pytest.mark.importtest
    def test_errors_import(self):
        """Test that InvalidParameter is a ValueError exposed at top level."""
        import pyfastnoise
        assert issubclass(pyfastnoise.InvalidParameter, ValueError)


class TestNoiseImports:
    """Test imports for noise synthesis modules."""

    @pytest.mark.importtest
    def test_noise_init_import(self):
        """Test noise package import."""
        import pyfastnoise.noise
        for name in ("build_config", "sample1", "sample2", "sample3",
                     "billow", "fbm", "ridged", "noise_grid"):
            assert hasattr(pyfastnoise.noise, name)

    @pytest.mark.importtest
    def test_noise_submodules_import(self):
        """Test each noise submodule import."""
        import pyfastnoise.noise.config
        import pyfastnoise.noise.fractal
        import pyfastnoise.noise.grid
        import pyfastnoise.noise.kernels
        import pyfastnoise.noise.permutation
        assert pyfastnoise.noise.kernels.KERNELS


class TestMiscImports:
    """Test imports for miscellaneous utility modules."""

    @pytest.mark.importtest
    def test_misc_init_import(self):
        """Test misc package import."""
        import pyfastnoise.misc
        assert hasattr(pyfastnoise.misc, 'save_grid_numpy')
        assert hasattr(pyfastnoise.misc, 'setup_logging')


class TestCLIImports:
    """Test imports for CLI modules."""

    @pytest.mark.importtest
    def test_cli_init_import(self):
        """Test CLI package import."""
        import pyfastnoise.cli
        assert pyfastnoise.cli is not None

    @pytest.mark.importtest
    def test_cli_noise_commands_import(self):
        """Test noise commands module import."""
        import pyfastnoise.cli.noise_commands
        assert hasattr(pyfastnoise.cli.noise_commands, 'noise_sample')
        assert hasattr(pyfastnoise.cli.noise_commands, 'noise_grid')

    @pytest.mark.importtest
    def test_cli_lazy_attribute(self):
        """Test CLI commands resolve lazily from the package."""
        import pyfastnoise.cli
        assert callable(pyfastnoise.cli.noise_sample)
        with pytest.raises(AttributeError):
            pyfastnoise.cli.not_a_command
