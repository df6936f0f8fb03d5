# Unit tests for utils/refs.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'kit-project'))

from utils import refs
from utils.errors import BranchNotFoundError, RefConflictError


class TestCurrentBranch:
    # Tests for refs.current_branch() and refs.set_current_branch()

    def test_fresh_repo_is_on_master(self, temp_repo):
        assert refs.current_branch(temp_repo.root) == 'master'

    def test_head_file_format(self, temp_repo):
        refs.set_current_branch(temp_repo.root, 'feature')
        with open(refs.head_path(temp_repo.root), 'r') as f:
            assert f.read() == 'ref: refs/heads/feature\n'

    def test_malformed_head(self, temp_repo):
        with open(refs.head_path(temp_repo.root), 'w') as f:
            f.write('deadbeef\n')
        with pytest.raises(ValueError):
            refs.current_branch(temp_repo.root)


class TestBranches:
    # Tests for refs.get_branch(), refs.write_branch() and refs.list_branches()

    def test_unborn_branch_has_empty_head(self, temp_repo):
        assert refs.get_branch(temp_repo.root, 'master') == refs.Branch('master', '')

    def test_missing_branch_is_none(self, temp_repo):
        assert refs.get_branch(temp_repo.root, 'nope') is None

    def test_write_and_list(self, temp_repo):
        refs.write_branch(temp_repo.root, 'feature', 'a' * 64)

        names = [name for name, _ in refs.list_branches(temp_repo.root)]
        assert names == ['feature', 'master']
        assert refs.get_branch(temp_repo.root, 'feature').head == 'a' * 64

    def test_write_overwrites(self, temp_repo):
        refs.write_branch(temp_repo.root, 'feature', 'a' * 64)
        refs.write_branch(temp_repo.root, 'feature', 'b' * 64)
        assert refs.get_branch(temp_repo.root, 'feature').head == 'b' * 64

    @pytest.mark.parametrize('name', ['', '  ', 'a/b', '.hidden', 'x.lock'])
    def test_invalid_names_rejected(self, temp_repo, name):
        with pytest.raises(ValueError):
            refs.write_branch(temp_repo.root, name, '')


class TestCheckout:
    # Tests for refs.checkout()

    def test_switches_active_branch(self, temp_repo):
        refs.write_branch(temp_repo.root, 'feature', '')
        refs.checkout(temp_repo.root, 'feature')
        assert refs.current_branch(temp_repo.root) == 'feature'

    def test_missing_branch_leaves_head_alone(self, temp_repo):
        with pytest.raises(BranchNotFoundError):
            refs.checkout(temp_repo.root, 'missing')
        assert refs.current_branch(temp_repo.root) == 'master'

    @pytest.mark.parametrize('name', ['../../HEAD', '..', 'a/b', ''])
    def test_invalid_name_leaves_head_alone(self, temp_repo, name):
        with pytest.raises(ValueError):
            refs.checkout(temp_repo.root, name)

        assert refs.current_branch(temp_repo.root) == 'master'
        with open(refs.head_path(temp_repo.root), 'r') as f:
            assert f.read() == 'ref: refs/heads/master\n'


class TestUpdateHead:
    # Tests for refs.update_head() compare-and-swap

    def test_moves_head_when_expected_matches(self, temp_repo):
        refs.update_head(temp_repo.root, 'master', 'c' * 64, '')
        assert refs.get_branch(temp_repo.root, 'master').head == 'c' * 64
        assert not os.path.exists(refs.branch_path(temp_repo.root, 'master') + '.lock')

    def test_conflict_when_ref_moved(self, temp_repo):
        refs.update_head(temp_repo.root, 'master', 'c' * 64, '')

        with pytest.raises(RefConflictError):
            refs.update_head(temp_repo.root, 'master', 'd' * 64, '')

        assert refs.get_branch(temp_repo.root, 'master').head == 'c' * 64
        assert not os.path.exists(refs.branch_path(temp_repo.root, 'master') + '.lock')

    def test_conflict_when_locked(self, temp_repo):
        lock_path = refs.branch_path(temp_repo.root, 'master') + '.lock'
        open(lock_path, 'w').close()

        with pytest.raises(RefConflictError):
            refs.update_head(temp_repo.root, 'master', 'c' * 64, '')

        # Someone else's lock is not ours to remove
        assert os.path.exists(lock_path)
        assert refs.get_branch(temp_repo.root, 'master').head == ''

    def test_invalid_name_rejected(self, temp_repo):
        with pytest.raises(ValueError):
            refs.update_head(temp_repo.root, '../../HEAD', 'c' * 64, '')
        assert refs.get_branch(temp_repo.root, 'master').head == ''


class TestNameValidation:
    # Tests for refs.is_valid_branch_name() and the lookups that rely on it

    @pytest.mark.parametrize('name', ['master', 'feature-1', 'release_2'])
    def test_valid_names(self, name):
        assert refs.is_valid_branch_name(name)

    @pytest.mark.parametrize('name', ['', '..', '../../HEAD', 'a/b', '.hidden', 'x.lock'])
    def test_invalid_names(self, name):
        assert not refs.is_valid_branch_name(name)

    def test_get_branch_rejects_traversal(self, temp_repo):
        with pytest.raises(ValueError):
            refs.get_branch(temp_repo.root, '../../HEAD')

    def test_set_current_branch_rejects_traversal(self, temp_repo):
        with pytest.raises(ValueError):
            refs.set_current_branch(temp_repo.root, '../../HEAD')
        assert refs.current_branch(temp_repo.root) == 'master'


class TestWriteBranchFailure:
    # refs.write_branch() must not leave its lock file behind

    def test_failed_replace_removes_lock(self, temp_repo, monkeypatch):
        def failing_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(refs.os, 'replace', failing_replace)

        with pytest.raises(OSError):
            refs.write_branch(temp_repo.root, 'feature', 'a' * 64)

        monkeypatch.undo()
        assert not os.path.exists(refs.branch_path(temp_repo.root, 'feature') + '.lock')
        assert refs.get_branch(temp_repo.root, 'feature') is None

        # The name is usable again once the failure is gone
        refs.write_branch(temp_repo.root, 'feature', 'a' * 64)
        assert refs.get_branch(temp_repo.root, 'feature').head == 'a' * 64
