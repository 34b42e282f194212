import pytest

from app.core import workflow
from app.core.exceptions import ConflictError, PermissionDeniedError, ValidationError
from app.models.accounts import Account
from app.models.posts import Post
from app.schemas.post import PostCreate, PostUpdate


def account(account_id, role):
    return Account(id=account_id, name=f"acct {account_id}", email=f"{account_id}@esgconnect.io", role=role, status="active")


def post_with(status, owner_id=1, **fields):
    return Post(
        id=10,
        title="EcoFarm",
        business_name="EcoFarm",
        investment_needed=5000,
        created_by=owner_id,
        status=status,
        **fields,
    )


OWNER = account(1, "business_owner")
STRANGER = account(2, "business_owner")
REVIEWER = account(3, "admin")


def test_submit_forces_pending_and_ownership():
    content = PostCreate.model_validate({"title": "EcoFarm", "investmentNeeded": 5000, "status": "approved"})

    post = workflow.submit(content, OWNER)

    assert post.status == "pending"
    assert post.created_by == OWNER.id
    assert post.approved_by is None
    assert post.rejection_reason is None


def test_title_and_business_name_fill_each_other():
    from_title = workflow.content_changes(PostCreate(title="SolarCo"))
    from_name = workflow.content_changes(PostCreate(business_name="WindCo"))

    assert from_title["business_name"] == "SolarCo"
    assert from_name["title"] == "WindCo"
    assert from_title["investment_needed"] == 0


def test_submit_requires_a_name():
    with pytest.raises(ValidationError):
        workflow.submit(PostCreate(description="no name"), OWNER)


def test_review_approve_sets_reviewer():
    changes = workflow.review(post_with("pending"), "approved", None, REVIEWER)

    assert changes == {"status": "approved", "approved_by": REVIEWER.id, "rejection_reason": None}


def test_review_reject_keeps_reason_verbatim():
    reason = "  Missing impact metrics.  "

    changes = workflow.review(post_with("pending"), "rejected", reason, REVIEWER)

    assert changes["status"] == "rejected"
    assert changes["rejection_reason"] == reason


@pytest.mark.parametrize("reason", [None, "", "   "])
def test_review_reject_requires_reason(reason):
    with pytest.raises(ValidationError):
        workflow.review(post_with("pending"), "rejected", reason, REVIEWER)


def test_review_rejects_unknown_decision():
    with pytest.raises(ValidationError):
        workflow.review(post_with("pending"), "pending", None, REVIEWER)


@pytest.mark.parametrize("current", ["approved", "rejected"])
def test_review_only_from_pending(current):
    with pytest.raises(ConflictError):
        workflow.review(post_with(current), "approved", None, REVIEWER)


@pytest.mark.parametrize("current", ["pending", "rejected"])
def test_edit_resets_review_fields(current):
    post = post_with(current, approved_by=REVIEWER.id, rejection_reason="too vague")

    changes = workflow.edit(post, PostUpdate(title="EcoFarm 2", industry="Food"), OWNER)

    assert changes["status"] == "pending"
    assert changes["approved_by"] is None
    assert changes["rejection_reason"] is None
    assert changes["title"] == "EcoFarm 2"
    assert changes["industry"] == "Food"


def test_edit_approved_post_is_immutable():
    with pytest.raises(PermissionDeniedError):
        workflow.edit(post_with("approved"), PostUpdate(title="New"), OWNER)


def test_edit_by_non_owner_is_forbidden():
    with pytest.raises(PermissionDeniedError):
        workflow.edit(post_with("pending"), PostUpdate(title="New"), STRANGER)


@pytest.mark.parametrize("requester", [OWNER, STRANGER, REVIEWER])
def test_delete_approved_always_fails(requester):
    with pytest.raises(PermissionDeniedError):
        workflow.check_delete(post_with("approved"), requester)


def test_delete_pending_by_owner_allowed():
    workflow.check_delete(post_with("pending"), OWNER)
    workflow.check_delete(post_with("rejected"), OWNER)
